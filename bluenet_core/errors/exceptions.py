# =============================================================================
# bluenet_core/errors/exceptions.py
# Custom Exception Hierarchy for the BlueNet navigation bar
# =============================================================================

from typing import Optional, Dict, Any


class BlueNetError(Exception):
    """
    Base exception for all BlueNet navigation errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "NAV_001")
        details: Additional context as a dictionary
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "BN_000"
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            base += f" | Details: {self.details}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# NAVIGATION EXCEPTIONS
# =============================================================================

class NavigationError(BlueNetError):
    """Raised when a navigation action cannot be carried out"""

    def __init__(
        self,
        message: str,
        target: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if target:
            details["target"] = target

        super().__init__(
            message=message,
            code="NAV_001",
            details=details,
            **kwargs,
        )


class ViewportSubscriptionError(BlueNetError):
    """Raised when the resize subscription cannot be acquired or released"""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            code="VIEW_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# SESSION EXCEPTIONS
# =============================================================================

class SessionError(BlueNetError):
    """Raised when session data needed by the navigation bar is unusable"""

    def __init__(
        self,
        message: str,
        session_key: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if session_key:
            details["session_key"] = session_key

        super().__init__(
            message=message,
            code="SESSION_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class ConfigurationError(BlueNetError):
    """Raised when configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type

        super().__init__(
            message=message,
            code="CONFIG_001",
            details=details,
            recoverable=False,
            **kwargs,
        )
