"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    QueryError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class NotSignedInError(AuthenticationError):
    """Raised when an operation needs a signed-in identity and there is none."""

    def __init__(self, message: str = "Sign in required"):
        super().__init__(message, code="NOT_SIGNED_IN")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class ProfileInsertError(QueryError):
    """
    Raised when sign-up created the identity but the profile insert failed.

    The identity is left without a profile row and needs remediation.
    """

    def __init__(self, identity_id: str, table: str, reason: str):
        super().__init__(
            f"Account created but profile setup failed: {reason}",
            table=table,
            code="PROFILE_INSERT_FAILED",
            details={"identity_id": identity_id},
        )
        self.identity_id = identity_id


class MalformedProfileError(ValidationError):
    """Raised when a profile row cannot be parsed into its model."""

    def __init__(self, identity_id: str, role: str):
        super().__init__(
            f"Stored {role} profile is malformed: {identity_id}",
            code="MALFORMED_PROFILE",
            details={"identity_id": identity_id, "role": role},
        )
