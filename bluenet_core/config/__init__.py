from .settings import NavigationSettings, DEFAULT_SETTINGS, load_settings

__all__ = ["NavigationSettings", "DEFAULT_SETTINGS", "load_settings"]
