# =============================================================================
# bluenet_core/navigation/menu.py
# Role-conditioned menu entries and active-item resolution
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from bluenet_core.errors import error_boundary
from bluenet_core.logging import get_logger
from .location import LocationSnapshot, TAB_PARAM
from .models import NavigationItem, ROLE_POLICYMAKER

logger = get_logger(__name__)

DASHBOARD_PATH = "/dashboard"


@dataclass(frozen=True)
class MenuEntry:
    """Static definition of a menu link; ``tab`` is None for the base route"""
    label: str
    icon_ref: str
    tab: Optional[str] = None

    def target(self, base_path: str = DASHBOARD_PATH) -> str:
        return f"{base_path}?{TAB_PARAM}={self.tab}" if self.tab else base_path


# Canonical order. Icon refs name lucide icons; rendering maps them.
BASE_ENTRIES: Tuple[MenuEntry, ...] = (
    MenuEntry("Dashboard", "home"),
    MenuEntry("Fish Forecast", "fish", tab="forecast"),
    MenuEntry("Market Prices", "trending-up", tab="market"),
    MenuEntry("Journey Track", "navigation", tab="journey"),
    MenuEntry("AI Assistant", "message-square", tab="assistant"),
)

POLICYMAKER_ENTRIES: Tuple[MenuEntry, ...] = (
    MenuEntry("Analytics", "bar-chart-3", tab="analytics"),
    MenuEntry("Compliance", "alert-triangle", tab="compliance"),
)

RECOGNIZED_TABS = frozenset(
    entry.tab for entry in BASE_ENTRIES + POLICYMAKER_ENTRIES if entry.tab
)


def visible_entries(role: Optional[str]) -> Tuple[MenuEntry, ...]:
    """Entries the given role may see, in canonical order"""
    if role == ROLE_POLICYMAKER:
        return BASE_ENTRIES + POLICYMAKER_ENTRIES
    return BASE_ENTRIES


def is_entry_active(
    entry: MenuEntry,
    location: LocationSnapshot,
    base_path: str = DASHBOARD_PATH,
) -> bool:
    """
    An entry is active when the path matches its base path and either it has
    no tab and the location carries no recognised tab, or the location
    carries its tab. Several recognised tabs in one query can make more
    than one entry active; which one wins is left to the caller.
    """
    if location.path != base_path:
        return False
    recognized = [t for t in location.tabs if t in RECOGNIZED_TABS]
    if entry.tab is None:
        return not recognized
    return entry.tab in recognized


@error_boundary(default_return=tuple)
def build_navigation_items(
    role: Optional[str],
    location: Optional[LocationSnapshot],
    base_path: str = DASHBOARD_PATH,
) -> Tuple[NavigationItem, ...]:
    """
    Resolve the ordered navigation items for a role at a location.

    Args:
        role: User role, or None for a guest
        location: Current route snapshot; None is treated as the site root
        base_path: Route the tabs hang off

    Returns:
        A new tuple of NavigationItem; equal inputs give equal tuples
    """
    location = location if location is not None else LocationSnapshot()
    items = tuple(
        NavigationItem(
            label=entry.label,
            target=entry.target(base_path),
            icon_ref=entry.icon_ref,
            is_active=is_entry_active(entry, location, base_path),
        )
        for entry in visible_entries(role)
    )

    active = [item.label for item in items if item.is_active]
    if len(active) > 1:
        logger.warning(f"Ambiguous location {location.url!r} activates {active}")
    return items


def active_item(items: Sequence[NavigationItem]) -> Optional[NavigationItem]:
    """First active item, or None"""
    return next((item for item in items if item.is_active), None)
