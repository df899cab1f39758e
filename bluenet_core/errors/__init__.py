# =============================================================================
# bluenet_core/errors/__init__.py
# Centralized Error Handling for the BlueNet navigation bar
# =============================================================================

from .exceptions import (
    BlueNetError,
    NavigationError,
    ViewportSubscriptionError,
    SessionError,
    ConfigurationError,
)

from .handlers import (
    handle_error,
    safe_execute,
    ErrorContext,
    error_boundary,
)

__all__ = [
    # Exceptions
    "BlueNetError",
    "NavigationError",
    "ViewportSubscriptionError",
    "SessionError",
    "ConfigurationError",
    # Handlers
    "handle_error",
    "safe_execute",
    "ErrorContext",
    "error_boundary",
]
