"""
Profiles module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when the caller's profile row is missing or not visible."""

    def __init__(self, identity_id: str):
        super().__init__(
            f"Profile not found: {identity_id}",
            code="PROFILE_NOT_FOUND",
            details={"identity_id": identity_id},
        )


class InvalidProfileUpdateError(ValidationError):
    """Raised when submitted profile fields fail validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            "Invalid profile update",
            code="INVALID_PROFILE_UPDATE",
            details={"errors": errors},
        )
