from .session import (
    SESSION_DEFAULTS,
    init_state,
    get_current_user,
    get_navigation_bar,
    report_viewport_width,
    dispose_navigation_bar,
    logout_user,
)

__all__ = [
    "SESSION_DEFAULTS",
    "init_state",
    "get_current_user",
    "get_navigation_bar",
    "report_viewport_width",
    "dispose_navigation_bar",
    "logout_user",
]
