# =============================================================================
# bluenet_core/navigation/account.py
# User dropdown entries (Profile, Settings, Logout)
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from bluenet_core.errors import error_boundary
from bluenet_core.logging import get_logger
from .disclosure import DisclosureController

logger = get_logger(__name__)

LOGOUT_ACTION = "logout"


@dataclass(frozen=True)
class AccountAction:
    key: str
    label: str
    icon_ref: str


ACCOUNT_ACTIONS: Tuple[AccountAction, ...] = (
    AccountAction("profile", "Profile", "user"),
    AccountAction("settings", "Settings", "settings"),
    AccountAction(LOGOUT_ACTION, "Logout", "log-out"),
)


def account_actions() -> Tuple[AccountAction, ...]:
    return ACCOUNT_ACTIONS


@error_boundary(default_return=False)
def perform_logout(
    on_logout: Optional[Callable[[], object]],
    disclosure: Optional[DisclosureController] = None,
) -> bool:
    """
    Close the mobile menu and hand off to the session's logout callback.

    The callback's return value is ignored. Failures are logged, never raised.

    Returns:
        True if the callback ran without error
    """
    if disclosure is not None:
        disclosure.close()
    if on_logout is None:
        logger.warning("Logout requested but no logout action is configured")
        return False
    on_logout()
    logger.info("Logout dispatched")
    return True
