"""
Display helpers for the signed-in user: avatar initials and role badge.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from bluenet_core.errors import error_boundary
from .models import UserProfile, ROLE_POLICYMAKER

FALLBACK_INITIALS = "U"
POLICYMAKER_BADGE = "bg-purple-100 text-purple-800"
DEFAULT_BADGE = "bg-blue-100 text-blue-800"


@error_boundary(default_return=FALLBACK_INITIALS)
def get_user_initials(profile: Optional[UserProfile]) -> str:
    """
    First letter of each word of the name, uppercased, at most two.

    >>> get_user_initials(UserProfile(name="Jane Doe"))
    'JD'
    """
    name = getattr(profile, "name", None)
    if not isinstance(name, str):
        return FALLBACK_INITIALS
    initials = "".join(word[0] for word in name.split()).upper()[:2]
    return initials or FALLBACK_INITIALS


@error_boundary(default_return=DEFAULT_BADGE)
def get_role_badge(profile: Optional[UserProfile]) -> str:
    """Style token for the role badge; guests get the standard token"""
    if getattr(profile, "role", None) == ROLE_POLICYMAKER:
        return POLICYMAKER_BADGE
    return DEFAULT_BADGE


@dataclass(frozen=True)
class IdentitySummary:
    initials: str = FALLBACK_INITIALS
    badge_token: str = DEFAULT_BADGE
    display_name: str = ""
    email: str = ""
    avatar_url: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def of(cls, profile: Optional[UserProfile]) -> IdentitySummary:
        if profile is None:
            return cls()
        return cls(
            initials=get_user_initials(profile),
            badge_token=get_role_badge(profile),
            display_name=getattr(profile, "name", "") or "",
            email=getattr(profile, "email", "") or "",
            avatar_url=getattr(profile, "avatar_url", None),
            role=getattr(profile, "role", None),
        )
