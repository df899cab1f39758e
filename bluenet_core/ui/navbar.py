# =============================================================================
# bluenet_core/ui/navbar.py
# Streamlit rendering of the BlueNet top navigation bar
# =============================================================================
from __future__ import annotations
from typing import Callable, Optional

import streamlit as st

from bluenet_core.navigation import (
    LocationSnapshot,
    NavigationBar,
    NavigationView,
    UserProfile,
)
from bluenet_core.navigation.account import LOGOUT_ACTION
from bluenet_core.navigation.location import TAB_PARAM

# lucide icon refs -> glyphs shown in Streamlit buttons
ICONS = {
    "home": "🏠",
    "fish": "🐟",
    "trending-up": "📈",
    "navigation": "🧭",
    "message-square": "💬",
    "bar-chart-3": "📊",
    "alert-triangle": "⚠️",
    "user": "👤",
    "settings": "⚙️",
    "log-out": "🚪",
    "menu": "☰",
    "x": "✕",
    "waves": "🌊",
}


def icon(ref: str) -> str:
    return ICONS.get(ref, "•")


def get_navbar_css() -> str:
    """Return CSS for the navigation bar."""
    return """
<style>
.bn-navbar {
    display: flex;
    align-items: center;
    height: 4rem;
    border-bottom: 1px solid #e5e7eb;
    background: #ffffff;
    margin-bottom: 0.5rem;
}
.bn-brand {
    font-size: 1.25rem;
    font-weight: 700;
    color: #1e3a8a;
}
.bn-badge {
    display: inline-block;
    padding: 0.1rem 0.5rem;
    border-radius: 9999px;
    font-size: 0.75rem;
    font-weight: 600;
}
.bn-badge.bg-blue-100 { background: #dbeafe; color: #1e40af; }
.bn-badge.bg-purple-100 { background: #f3e8ff; color: #6b21a8; }
.bn-mobile-panel {
    border-top: 1px solid #e5e7eb;
    padding-top: 0.5rem;
}
</style>
"""


def navigate_to_tab(target: str) -> None:
    """Router action: reflect the item's tab in the page query string."""
    location = LocationSnapshot.from_url(target)
    if location.tab:
        st.query_params[TAB_PARAM] = location.tab
    elif TAB_PARAM in st.query_params:
        del st.query_params[TAB_PARAM]


def current_location(base_path: str) -> LocationSnapshot:
    """Router snapshot for a Streamlit page mounted at ``base_path``."""
    return LocationSnapshot.from_query_params(base_path, st.query_params)


def _render_brand(view: NavigationView) -> None:
    st.markdown(
        f"<div class='bn-brand'>{icon('waves')} {view.brand_name}</div>",
        unsafe_allow_html=True,
    )


def _render_identity(view: NavigationView) -> None:
    identity = view.identity
    role = identity.role or "standard"
    st.markdown(
        f"**{identity.initials}** {identity.display_name} "
        f"<span class='bn-badge {identity.badge_token}'>{role}</span>",
        unsafe_allow_html=True,
    )
    if identity.email:
        st.caption(identity.email)


def _render_items(
    bar: NavigationBar,
    view: NavigationView,
    navigate: Callable[[str], None],
    key_prefix: str,
) -> None:
    for item in view.items:
        st.button(
            f"{icon(item.icon_ref)} {item.label}",
            key=f"{key_prefix}_{item.label}",
            disabled=item.is_active,
            width="stretch",
            on_click=bar.select,
            args=(item, navigate),
        )


def _render_account(
    bar: NavigationBar,
    view: NavigationView,
    on_logout: Optional[Callable[[], object]],
    key_prefix: str,
) -> None:
    for action in view.account_actions:
        label = f"{icon(action.icon_ref)} {action.label}"
        if action.key == LOGOUT_ACTION:
            st.button(label, key=f"{key_prefix}_{action.key}",
                      on_click=bar.logout, args=(on_logout,))
        else:
            st.button(label, key=f"{key_prefix}_{action.key}", disabled=True,
                      help=f"{action.label} is not available yet")


def render_navbar(
    bar: NavigationBar,
    profile: Optional[UserProfile],
    location: LocationSnapshot,
    on_logout: Optional[Callable[[], object]] = None,
    navigate: Callable[[str], None] = navigate_to_tab,
) -> NavigationView:
    """
    Render the navigation bar for the current frame.

    Desktop: one column per item, the active item disabled, and the
    account menu in a popover. Compact: a toggle button and, when open,
    the stacked items followed by the account panel.

    Returns:
        The view model that was rendered
    """
    st.markdown(get_navbar_css(), unsafe_allow_html=True)
    view = bar.render_model(profile, location)

    if not view.viewport.is_compact:
        brand_col, *item_cols, user_col = st.columns([2] + [1] * len(view.items) + [1])
        with brand_col:
            _render_brand(view)
        for col, item in zip(item_cols, view.items):
            with col:
                st.button(
                    f"{icon(item.icon_ref)} {item.label}",
                    key=f"nav_desktop_{item.label}",
                    disabled=item.is_active,
                    width="stretch",
                    on_click=bar.select,
                    args=(item, navigate),
                )
        with user_col:
            with st.popover(view.identity.initials):
                st.markdown("**My Account**")
                _render_identity(view)
                st.divider()
                _render_account(bar, view, on_logout, "nav_desktop")
        return view

    brand_col, toggle_col = st.columns([4, 1])
    with brand_col:
        _render_brand(view)
    with toggle_col:
        st.button(
            icon(view.disclosure.toggle_icon),
            key="nav_toggle",
            help=view.disclosure.toggle_label,
            on_click=bar.toggle,
        )

    if view.show_mobile_menu:
        _render_items(bar, view, navigate, "nav_mobile")
        st.markdown("<div class='bn-mobile-panel'></div>", unsafe_allow_html=True)
        _render_identity(view)
        _render_account(bar, view, on_logout, "nav_mobile")

    return view
