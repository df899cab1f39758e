# =============================================================================
# bluenet_core/navigation/models.py
# Value types shared by the navigation components
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ROLE_POLICYMAKER = "policymaker"
ROLE_STANDARD = "standard"
KNOWN_ROLES = (ROLE_POLICYMAKER, ROLE_STANDARD)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class UserProfile:
    """Signed-in user as supplied by the session. Never mutated here."""
    name: str = ""
    email: str = ""
    avatar_url: Optional[str] = None
    role: str = ROLE_STANDARD

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional[UserProfile]:
        """
        Build a profile from loose session data.

        Returns None when there is no usable mapping. Unknown roles are
        treated as standard; non-string fields become empty strings.
        """
        if not isinstance(data, Mapping):
            return None

        role = data.get("role")
        avatar = data.get("avatar_url", data.get("avatar"))
        return cls(
            name=_as_text(data.get("name")),
            email=_as_text(data.get("email")),
            avatar_url=avatar if isinstance(avatar, str) and avatar else None,
            role=role if role in KNOWN_ROLES else ROLE_STANDARD,
        )


@dataclass(frozen=True)
class NavigationItem:
    """One rendered link in the navigation bar"""
    label: str
    target: str
    icon_ref: str
    is_active: bool = False


@dataclass(frozen=True)
class ViewportState:
    width_px: int
    is_compact: bool

    @classmethod
    def from_width(cls, width_px: int, breakpoint_px: int) -> ViewportState:
        width = max(0, int(width_px))
        return cls(width_px=width, is_compact=width < breakpoint_px)


@dataclass(frozen=True)
class DisclosureState:
    """Open/closed state of the mobile overlay menu"""
    is_open: bool = False

    @property
    def toggle_icon(self) -> str:
        return "x" if self.is_open else "menu"

    @property
    def toggle_label(self) -> str:
        return "Close menu" if self.is_open else "Open menu"
