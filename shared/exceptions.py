"""
Base exception classes for the Hire My Hub backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class HireHubError(Exception):
    """
    Base exception for all Hire My Hub errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(HireHubError):
    """Resource not found."""

    pass


class ValidationError(HireHubError):
    """Input validation failed."""

    pass


class AuthenticationError(HireHubError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(HireHubError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(HireHubError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class AuthProviderError(AuthenticationError):
    """
    The auth provider rejected a request.

    Covers bad credentials, duplicate sign-up emails and any other
    provider-side refusal. The provider's message is kept verbatim so
    the UI can show it as-is.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code=code or "AUTH_ERROR")


class QueryError(ExternalServiceError):
    """A table read or write against the backend store failed."""

    def __init__(
        self,
        message: str,
        table: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service="supabase",
            code=code or "QUERY_ERROR",
            details=details,
        )
        self.table = table
        self.details["table"] = table
