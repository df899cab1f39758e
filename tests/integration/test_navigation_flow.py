# =============================================================================
# tests/integration/test_navigation_flow.py
# Integration Tests: viewport -> disclosure -> menu through NavigationBar
# =============================================================================

from unittest.mock import MagicMock

from bluenet_core.config import NavigationSettings
from bluenet_core.navigation import (
    LocationSnapshot,
    ManualWindow,
    NavigationBar,
    active_item,
)


class TestNavigationBarFlow:
    """Test viewport, disclosure and menu working together"""

    def test_mobile_open_select_navigate(self, mobile_window, policymaker):
        """Mobile open select navigate"""
        navigate = MagicMock()

        with NavigationBar(mobile_window) as bar:
            view = bar.render_model(policymaker, LocationSnapshot.from_url("/dashboard"))
            assert view.viewport.is_compact is True
            assert view.show_mobile_menu is False

            bar.toggle()
            view = bar.render_model(policymaker, LocationSnapshot.from_url("/dashboard"))
            assert view.show_mobile_menu is True
            assert len(view.items) == 7

            compliance = view.items[-1]
            assert bar.select(compliance, navigate) == "/dashboard?tab=compliance"
            navigate.assert_called_once_with("/dashboard?tab=compliance")

            view = bar.render_model(policymaker, LocationSnapshot.from_url(compliance.target))
            assert view.disclosure.is_open is False
            assert active_item(view.items).label == "Compliance"

        assert mobile_window.handlers == []

    def test_widening_closes_open_menu(self, mobile_window, standard_user):
        """Widening closes open menu"""
        with NavigationBar(mobile_window) as bar:
            bar.toggle()
            assert bar.disclosure.is_open is True

            mobile_window.resize(1024)

            view = bar.render_model(standard_user, LocationSnapshot.from_url("/dashboard"))
            assert view.viewport.is_compact is False
            assert view.disclosure.is_open is False

            # Toggle on desktop does nothing
            bar.toggle()
            assert bar.disclosure.is_open is False

    def test_narrowing_does_not_open_menu(self, desktop_window):
        """Narrowing does not open menu"""
        with NavigationBar(desktop_window) as bar:
            desktop_window.resize(400)
            assert bar.viewport.is_compact is True
            assert bar.disclosure.is_open is False

    def test_logout_closes_menu(self, mobile_window, standard_user):
        """Logout closes menu"""
        on_logout = MagicMock()
        with NavigationBar(mobile_window) as bar:
            bar.toggle()
            assert bar.logout(on_logout) is True

        on_logout.assert_called_once_with()
        assert bar.disclosure.is_open is False

    def test_failing_navigate_is_contained(self, mobile_window, standard_user):
        """Failing navigate is contained"""
        def navigate(target):
            raise RuntimeError("router gone")

        with NavigationBar(mobile_window) as bar:
            view = bar.render_model(standard_user, LocationSnapshot.from_url("/dashboard"))
            assert bar.select(view.items[1], navigate) == "/dashboard?tab=forecast"

    def test_guest_view(self, desktop_window):
        """Guest view"""
        with NavigationBar(desktop_window) as bar:
            view = bar.render_model(None, LocationSnapshot.from_url("/dashboard?tab=market"))

        assert view.identity.initials == "U"
        assert len(view.items) == 5
        assert active_item(view.items).label == "Market Prices"
        assert [a.key for a in view.account_actions] == ["profile", "settings", "logout"]

    def test_settings_flow_through(self, standard_user):
        """Settings flow through"""
        settings = NavigationSettings(compact_breakpoint_px=1024, brand_name="Samaki", dashboard_path="/app")
        window = ManualWindow(900)

        with NavigationBar(window, settings) as bar:
            view = bar.render_model(standard_user, LocationSnapshot.from_url("/app?tab=journey"))

        assert view.brand_name == "Samaki"
        assert view.viewport.is_compact is True
        assert active_item(view.items).target == "/app?tab=journey"

    def test_subscription_failure_gives_desktop(self, failing_window, standard_user):
        """Subscription failure gives desktop"""
        with NavigationBar(failing_window) as bar:
            bar.toggle()
            view = bar.render_model(standard_user, LocationSnapshot.from_url("/dashboard"))

        assert view.viewport.is_compact is False
        assert view.disclosure.is_open is False

    def test_unmount_is_symmetric_across_remounts(self, mobile_window):
        """Unmount is symmetric across remounts"""
        bar = NavigationBar(mobile_window)
        for _ in range(3):
            bar.mount()
            bar.unmount()

        assert mobile_window.subscribe_calls == mobile_window.unsubscribe_calls == 3
        assert mobile_window.handlers == []

    def test_render_model_applies_held_resize(self, standard_user):
        """View model reflects the last resize once the rate limit allows"""
        now = [0.0]
        window = ManualWindow(500)
        bar = NavigationBar(window, NavigationSettings(resize_min_interval=1.0))
        bar.viewport._clock = lambda: now[0]

        with bar:
            window.resize(600)
            now[0] = 0.1
            window.resize(650)
            now[0] = 10.0
            view = bar.render_model(standard_user, LocationSnapshot.from_url("/dashboard"))

        assert view.viewport.width_px == 650
