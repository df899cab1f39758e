# =============================================================================
# tests/unit/test_settings.py
# Unit Tests for navigation settings
# =============================================================================

import pytest

from bluenet_core.config import DEFAULT_SETTINGS, NavigationSettings, load_settings
from bluenet_core.errors import ConfigurationError


class TestNavigationSettings:
    """Test settings validation"""

    def test_defaults(self):
        """Defaults"""
        assert DEFAULT_SETTINGS.compact_breakpoint_px == 768
        assert DEFAULT_SETTINGS.dashboard_path == "/dashboard"
        assert DEFAULT_SETTINGS.brand_name == "BlueNet"

    @pytest.mark.parametrize("values", [
        {"compact_breakpoint_px": 0},
        {"compact_breakpoint_px": "768"},
        {"dashboard_path": "dashboard"},
        {"default_viewport_width": -1},
        {"resize_min_interval": -0.5},
    ])
    def test_invalid_values_rejected(self, values):
        """Invalid values rejected"""
        with pytest.raises(ConfigurationError):
            NavigationSettings.from_mapping(values)

    def test_unknown_keys_ignored(self):
        """Unknown keys ignored"""
        settings = NavigationSettings.from_mapping({"brand_name": "Samaki", "theme": "dark"})
        assert settings.brand_name == "Samaki"


class TestLoadSettings:
    """Test loading settings from secrets"""

    def test_no_secrets_gives_defaults(self, mock_secrets):
        """No secrets gives defaults"""
        assert load_settings() == DEFAULT_SETTINGS

    def test_reads_secrets_section(self, mock_secrets):
        """Reads secrets section"""
        mock_secrets["navigation"] = {"compact_breakpoint_px": 1024}
        assert load_settings().compact_breakpoint_px == 1024

    def test_overrides_beat_secrets(self, mock_secrets):
        """Overrides beat secrets"""
        mock_secrets["navigation"] = {"brand_name": "FromSecrets"}
        assert load_settings({"brand_name": "FromTest"}).brand_name == "FromTest"

    def test_invalid_secrets_fall_back(self, mock_secrets):
        """Invalid secrets fall back"""
        mock_secrets["navigation"] = {"compact_breakpoint_px": -10}
        assert load_settings() == DEFAULT_SETTINGS
