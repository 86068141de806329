"""
Messages module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class MessageNotFoundError(NotFoundError):
    """Raised when a message is not found."""

    def __init__(self, message_id: str):
        super().__init__(
            f"Message not found: {message_id}",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class MessageAccessDeniedError(AuthorizationError):
    """Raised when the caller is neither sender nor receiver."""

    def __init__(self, message_id: str, user_id: str):
        super().__init__(
            f"Access denied to message: {message_id}",
            code="MESSAGE_ACCESS_DENIED",
            details={"message_id": message_id, "user_id": user_id},
        )
