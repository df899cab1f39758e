import streamlit as st

from bluenet_core.config import load_settings
from bluenet_core.errors import SessionError, handle_error
from bluenet_core.logging import get_logger
from bluenet_core.navigation import ManualWindow, NavigationBar, UserProfile

logger = get_logger(__name__)

NAV_BAR_KEY = "_navigation_bar"
VIEWPORT_WINDOW_KEY = "_viewport_window"
AUTH_KEYS = ["authenticated", "current_user", "authentication_status"]

# Central registry for session-state keys used by the navigation bar.
SESSION_DEFAULTS = {
    "authenticated": False,
    "current_user": None,
    "viewport_width": None,
    NAV_BAR_KEY: None,
    VIEWPORT_WINDOW_KEY: None,
}


def init_state():
    """Initialize session state with navigation defaults."""
    for k, v in SESSION_DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = v


def _profile_from_session(data):
    profile = UserProfile.from_mapping(data)
    if profile is None:
        raise SessionError(
            "current_user is not a mapping",
            session_key="current_user",
            details={"type": type(data).__name__},
        )
    return profile


def get_current_user():
    """
    Profile of the signed-in user, or None for a guest.
    Malformed session data is logged and treated as a guest.
    """
    if not st.session_state.get("authenticated", False):
        return None
    data = st.session_state.get("current_user")
    if data is None:
        return None
    try:
        return _profile_from_session(data)
    except SessionError as e:
        handle_error(e)
        return None


def get_navigation_bar() -> NavigationBar:
    """
    One mounted NavigationBar per browser session.

    The bar listens to a ManualWindow; the page pushes the browser width
    into it through ``report_viewport_width``.
    """
    init_state()
    bar = st.session_state.get(NAV_BAR_KEY)
    if bar is None:
        settings = load_settings()
        width = st.session_state.get("viewport_width") or settings.default_viewport_width
        window = ManualWindow(width)
        bar = NavigationBar(window, settings)
        bar.mount()
        st.session_state[VIEWPORT_WINDOW_KEY] = window
        st.session_state[NAV_BAR_KEY] = bar
        logger.info("Created navigation bar for session")
    return bar


def report_viewport_width(width):
    """Feed a browser-reported width into the session's window, firing a resize."""
    if not isinstance(width, (int, float)) or width < 0:
        logger.debug(f"Ignoring invalid viewport width: {width!r}")
        return
    st.session_state["viewport_width"] = int(width)
    window = st.session_state.get(VIEWPORT_WINDOW_KEY)
    if window is not None:
        window.resize(int(width))


def dispose_navigation_bar():
    """Unmount and drop the session's navigation bar."""
    bar = st.session_state.get(NAV_BAR_KEY)
    if bar is not None:
        bar.unmount()
    st.session_state[NAV_BAR_KEY] = None
    st.session_state[VIEWPORT_WINDOW_KEY] = None


def logout_user():
    """Clear authentication keys; the navigation bar itself stays mounted."""
    for key in AUTH_KEYS:
        if key in st.session_state:
            del st.session_state[key]
    st.session_state["authenticated"] = False
    logger.info("User logged out")
