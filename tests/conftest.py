# =============================================================================
# tests/conftest.py
# Pytest Configuration and Fixtures
# =============================================================================

import pytest
from unittest.mock import MagicMock

from bluenet_core.navigation import (
    LocationSnapshot,
    ManualWindow,
    UserProfile,
)


# =============================================================================
# PROFILE FIXTURES
# =============================================================================

@pytest.fixture
def standard_user():
    return UserProfile(
        name="Jane Doe",
        email="jane.doe@bluenet.example",
        role="standard",
    )


@pytest.fixture
def policymaker():
    return UserProfile(
        name="Amina Wanjiru Otieno",
        email="amina@fisheries.example",
        avatar_url="https://cdn.example/amina.png",
        role="policymaker",
    )


# =============================================================================
# LOCATION FIXTURES
# =============================================================================

@pytest.fixture
def dashboard_location():
    return LocationSnapshot.from_url("/dashboard")


@pytest.fixture
def market_location():
    return LocationSnapshot.from_url("/dashboard?tab=market")


# =============================================================================
# WINDOW FIXTURES
# =============================================================================

@pytest.fixture
def mobile_window():
    return ManualWindow(500)


@pytest.fixture
def desktop_window():
    return ManualWindow(900)


class FailingWindow(ManualWindow):
    """Window whose resize registration always fails"""

    def subscribe(self, handler):
        self.subscribe_calls += 1
        raise RuntimeError("addEventListener unavailable")


@pytest.fixture
def failing_window():
    return FailingWindow(500)


# =============================================================================
# MOCK FIXTURES
# =============================================================================

@pytest.fixture
def mock_session(monkeypatch):
    """Replace Streamlit in the session module with a dict-backed mock"""
    import bluenet_core.state.session as session

    mock_st = MagicMock()
    mock_st.session_state = {}
    monkeypatch.setattr(session, "st", mock_st)
    return mock_st.session_state


@pytest.fixture
def mock_secrets(monkeypatch):
    """Install a fake st.secrets mapping for the settings module"""
    import bluenet_core.config.settings as settings

    mock_st = MagicMock()
    mock_st.secrets = {}
    monkeypatch.setattr(settings, "st", mock_st)
    return mock_st.secrets


@pytest.fixture
def mock_ui(monkeypatch):
    """Replace Streamlit in the navbar renderer with a recording mock"""
    import bluenet_core.ui.navbar as navbar

    mock_st = MagicMock()
    mock_st.query_params = {}
    mock_st.columns.side_effect = lambda spec: [
        MagicMock() for _ in (spec if isinstance(spec, list) else range(spec))
    ]
    monkeypatch.setattr(navbar, "st", mock_st)
    return mock_st
