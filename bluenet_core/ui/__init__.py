from .navbar import render_navbar, current_location, navigate_to_tab, get_navbar_css

__all__ = ["render_navbar", "current_location", "navigate_to_tab", "get_navbar_css"]
