# =============================================================================
# tests/unit/test_session_state.py
# Unit Tests for session-state glue
# =============================================================================

import logging

import pytest

from bluenet_core.errors import SessionError
from bluenet_core.navigation import NavigationBar
from bluenet_core.state import session


class TestSessionState:
    """Test session-state glue for the navigation bar"""

    def test_init_state_sets_defaults(self, mock_session):
        """Init state sets defaults"""
        session.init_state()
        for key in session.SESSION_DEFAULTS:
            assert key in mock_session

    def test_guest_when_not_authenticated(self, mock_session):
        """Guest when not authenticated"""
        mock_session["current_user"] = {"name": "Jane Doe"}
        assert session.get_current_user() is None

    def test_current_user_from_session(self, mock_session):
        """Current user from session"""
        mock_session["authenticated"] = True
        mock_session["current_user"] = {"name": "Jane Doe", "role": "policymaker"}

        user = session.get_current_user()
        assert user.name == "Jane Doe"
        assert user.role == "policymaker"

    def test_malformed_user_is_guest(self, mock_session):
        """Malformed user is guest"""
        mock_session["authenticated"] = True
        mock_session["current_user"] = "jane"
        assert session.get_current_user() is None

    def test_navigation_bar_is_per_session(self, mock_session, mock_secrets):
        """Navigation bar is per session"""
        bar = session.get_navigation_bar()
        assert isinstance(bar, NavigationBar)
        assert session.get_navigation_bar() is bar

    def test_reported_width_reaches_bar(self, mock_session, mock_secrets):
        """Reported width reaches bar"""
        bar = session.get_navigation_bar()
        session.report_viewport_width(400)

        assert bar.viewport.is_compact is True
        assert mock_session["viewport_width"] == 400

    def test_invalid_width_ignored(self, mock_session, mock_secrets):
        """Invalid width ignored"""
        bar = session.get_navigation_bar()
        session.report_viewport_width("wide")
        assert bar.viewport.state.width_px == 1280

    def test_dispose_unmounts(self, mock_session, mock_secrets):
        """Dispose unmounts"""
        session.get_navigation_bar()
        window = mock_session[session.VIEWPORT_WINDOW_KEY]
        session.dispose_navigation_bar()

        assert window.handlers == []
        assert window.subscribe_calls == window.unsubscribe_calls
        assert mock_session[session.NAV_BAR_KEY] is None

    def test_logout_clears_auth_keys(self, mock_session):
        """Logout clears auth keys"""
        mock_session["authenticated"] = True
        mock_session["current_user"] = {"name": "Jane Doe"}
        session.logout_user()

        assert mock_session["authenticated"] is False
        assert "current_user" not in mock_session

    def test_malformed_user_raises_session_error_internally(self):
        """Non-mapping session data is reported as a SessionError"""
        with pytest.raises(SessionError) as excinfo:
            session._profile_from_session(["Jane", "Doe"])

        assert excinfo.value.code == "SESSION_001"
        assert excinfo.value.details["session_key"] == "current_user"

    def test_malformed_user_is_logged(self, mock_session, caplog):
        """Malformed current_user is logged, not raised"""
        mock_session["authenticated"] = True
        mock_session["current_user"] = 42

        with caplog.at_level(logging.ERROR):
            assert session.get_current_user() is None

        assert "SESSION_001" in caplog.text
