"""
Navigation settings.

Loaded from Streamlit secrets when available, otherwise defaults are used.

Expected secrets.toml format:
    [navigation]
    compact_breakpoint_px = 768
    dashboard_path = "/dashboard"
    brand_name = "BlueNet"
    default_viewport_width = 1280
    resize_min_interval = 0.0
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import streamlit as st

from bluenet_core.errors import ConfigurationError
from bluenet_core.logging import get_logger

logger = get_logger(__name__)

SECRETS_SECTION = "navigation"


@dataclass(frozen=True)
class NavigationSettings:
    """Tunable constants for the navigation bar"""
    compact_breakpoint_px: int = 768
    dashboard_path: str = "/dashboard"
    brand_name: str = "BlueNet"
    default_viewport_width: int = 1280
    resize_min_interval: float = 0.0

    def validate(self) -> NavigationSettings:
        """Raise ConfigurationError if any value is out of range"""
        if not isinstance(self.compact_breakpoint_px, int) or self.compact_breakpoint_px <= 0:
            raise ConfigurationError(
                "compact_breakpoint_px must be a positive integer",
                config_key="compact_breakpoint_px",
                expected_type="int > 0",
            )
        if not isinstance(self.dashboard_path, str) or not self.dashboard_path.startswith("/"):
            raise ConfigurationError(
                "dashboard_path must be an absolute route path",
                config_key="dashboard_path",
                expected_type="str starting with '/'",
            )
        if not isinstance(self.default_viewport_width, int) or self.default_viewport_width < 0:
            raise ConfigurationError(
                "default_viewport_width must be a non-negative integer",
                config_key="default_viewport_width",
                expected_type="int >= 0",
            )
        if not isinstance(self.resize_min_interval, (int, float)) or self.resize_min_interval < 0:
            raise ConfigurationError(
                "resize_min_interval must be a non-negative number",
                config_key="resize_min_interval",
                expected_type="float >= 0",
            )
        return self

    @classmethod
    def from_mapping(cls, values: Dict[str, Any]) -> NavigationSettings:
        """Build settings from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in dict(values).items() if k in known}
        unknown = set(values) - known
        if unknown:
            logger.warning(f"Ignoring unknown navigation settings: {sorted(unknown)}")
        return replace(cls(), **overrides).validate()


DEFAULT_SETTINGS = NavigationSettings()


def _read_secrets() -> Optional[Dict[str, Any]]:
    try:
        if hasattr(st, "secrets") and SECRETS_SECTION in st.secrets:
            return dict(st.secrets[SECRETS_SECTION])
    except Exception:
        # st.secrets raises when no secrets.toml exists
        logger.debug("No Streamlit secrets available, using navigation defaults")
    return None


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> NavigationSettings:
    """
    Load navigation settings.

    Args:
        overrides: Values that take precedence over secrets (used by tests)

    Returns:
        Validated settings, or the defaults if the configured values are invalid
    """
    values = _read_secrets() or {}
    if overrides:
        values.update(overrides)
    if not values:
        return DEFAULT_SETTINGS

    try:
        return NavigationSettings.from_mapping(values)
    except ConfigurationError as e:
        logger.error(f"Invalid navigation settings, falling back to defaults: {e}")
        return DEFAULT_SETTINGS
