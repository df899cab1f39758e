from __future__ import annotations
import streamlit as st

from bluenet_core.errors import ErrorContext
from bluenet_core.logging import setup_logging, get_logger, LogContext
from bluenet_core.state import (
    get_current_user,
    get_navigation_bar,
    init_state,
    logout_user,
    report_viewport_width,
)
from bluenet_core.ui import current_location, render_navbar

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================
st.set_page_config(
    page_title="BlueNet - Dashboard",
    page_icon="🌊",
    layout="wide",
    initial_sidebar_state="collapsed",
)

if "_logging_ready" not in st.session_state:
    setup_logging()
    st.session_state["_logging_ready"] = True

logger = get_logger(__name__)
init_state()

# Demo session until the auth collaborator is wired in
if st.session_state.get("current_user") is None and not st.session_state.get("_logged_out"):
    st.session_state["authenticated"] = True
    st.session_state["current_user"] = {
        "name": "Jane Doe",
        "email": "jane.doe@bluenet.example",
        "role": "policymaker",
    }


def _on_logout():
    logout_user()
    st.session_state["_logged_out"] = True


# Streamlit cannot observe the browser width; preview it from the sidebar
st.sidebar.slider(
    "Viewport width (px)",
    min_value=320,
    max_value=1920,
    value=st.session_state.get("viewport_width") or 1280,
    key="_viewport_slider",
    on_change=lambda: report_viewport_width(st.session_state["_viewport_slider"]),
)

bar = get_navigation_bar()
location = current_location(bar.settings.dashboard_path)
view = None

with ErrorContext("Rendering navigation bar", show_user_message=True), \
        LogContext(logger, "Rendering navigation bar"):
    view = render_navbar(bar, get_current_user(), location, on_logout=_on_logout)

# ============================================================================
# SECTION BODY
# ============================================================================
SECTION_BLURBS = {
    None: "Overview of today's catch, prices and trips.",
    "forecast": "Predicted fish availability by zone.",
    "market": "Current landing-site market prices.",
    "journey": "Live and past fishing journeys.",
    "assistant": "Ask the AI assistant about conditions and regulations.",
    "analytics": "Fleet-wide analytics for policymakers.",
    "compliance": "Compliance alerts and reports.",
}

items = view.items if view is not None else ()
active = next((item for item in items if item.is_active), None)
st.header(active.label if active else "Dashboard")
st.write(SECTION_BLURBS.get(location.tab, SECTION_BLURBS[None]))
