# =============================================================================
# tests/unit/test_account.py
# Unit Tests for the account menu and logout dispatch
# =============================================================================

from unittest.mock import MagicMock

from bluenet_core.navigation import (
    DisclosureController,
    account_actions,
    perform_logout,
)


class TestAccountActions:
    """Test the account dropdown entries"""

    def test_fixed_order(self):
        """Fixed order"""
        assert [a.label for a in account_actions()] == ["Profile", "Settings", "Logout"]


class TestLogout:
    """Test logout dispatch"""

    def test_closes_menu_then_calls_back(self):
        """Closes menu then calls back"""
        controller = DisclosureController(is_compact=True)
        controller.toggle()
        on_logout = MagicMock()

        assert perform_logout(on_logout, controller) is True
        on_logout.assert_called_once_with()
        assert controller.is_open is False

    def test_return_value_ignored(self):
        """Return value ignored"""
        assert perform_logout(lambda: "redirect", None) is True

    def test_missing_callback(self):
        """Missing callback"""
        controller = DisclosureController(is_compact=True)
        controller.toggle()

        assert perform_logout(None, controller) is False
        assert controller.is_open is False

    def test_failing_callback_is_contained(self):
        """Failing callback is contained"""
        def broken():
            raise ConnectionError("auth server down")

        assert perform_logout(broken) is False
