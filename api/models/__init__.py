"""API models package."""

from .auth import AuthResponse, SignInRequest, SignUpRequest, SignUpResponse
from .errors import ERROR_RESPONSES, ErrorResponse

__all__ = [
    "AuthResponse",
    "SignInRequest",
    "SignUpRequest",
    "SignUpResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
]
