"""
Navigation state model for the BlueNet top bar.

Nothing here reads Streamlit session state; everything can be driven from tests with a
ManualWindow and plain LocationSnapshot values.
"""

from .models import (
    UserProfile,
    NavigationItem,
    ViewportState,
    DisclosureState,
    ROLE_POLICYMAKER,
    ROLE_STANDARD,
)
from .location import LocationSnapshot
from .menu import (
    MenuEntry,
    build_navigation_items,
    visible_entries,
    active_item,
    DASHBOARD_PATH,
    RECOGNIZED_TABS,
)
from .viewport import (
    ViewportObserver,
    WindowSource,
    StaticWindow,
    ManualWindow,
    COMPACT_BREAKPOINT_PX,
)
from .disclosure import DisclosureController
from .identity import IdentitySummary, get_user_initials, get_role_badge
from .account import AccountAction, account_actions, perform_logout
from .navbar import NavigationBar, NavigationView

__all__ = [
    "UserProfile",
    "NavigationItem",
    "ViewportState",
    "DisclosureState",
    "ROLE_POLICYMAKER",
    "ROLE_STANDARD",
    "LocationSnapshot",
    "MenuEntry",
    "build_navigation_items",
    "visible_entries",
    "active_item",
    "DASHBOARD_PATH",
    "RECOGNIZED_TABS",
    "ViewportObserver",
    "WindowSource",
    "StaticWindow",
    "ManualWindow",
    "COMPACT_BREAKPOINT_PX",
    "DisclosureController",
    "IdentitySummary",
    "get_user_initials",
    "get_role_badge",
    "AccountAction",
    "account_actions",
    "perform_logout",
    "NavigationBar",
    "NavigationView",
]
