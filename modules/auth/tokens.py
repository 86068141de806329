"""
Access token validation.

Validates Supabase JWT access tokens before the API builds a
user-scoped Supabase client with them.
"""

from typing import Optional

import jwt
from pydantic import BaseModel

from shared.config import get_settings
from shared.models import Identity

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError


class TokenPayload(BaseModel):
    """Claims we read from a Supabase access token."""

    model_config = {"extra": "ignore"}

    sub: str  # User ID
    email: Optional[str] = None
    aud: str
    exp: int
    iat: Optional[int] = None


class TokenValidator:
    """Checks signature, expiry and audience of Supabase access tokens."""

    algorithms = ["HS256"]
    audience = "authenticated"

    def __init__(self, secret: Optional[str] = None):
        self._secret = secret if secret is not None else get_settings().supabase_jwt_secret

    async def validate_token(self, token: Optional[str]) -> Identity:
        """
        Validate a JWT and return the identity it was issued to.

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed, has a bad
                signature or audience, or the server has no JWT secret
        """
        if not token:
            raise MissingTokenError()
        if not self._secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=self.algorithms,
                audience=self.audience,
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        claims = TokenPayload.model_validate(payload)
        return Identity(id=claims.sub, email=claims.email or "")


_validator_instance: Optional[TokenValidator] = None


def get_token_validator() -> TokenValidator:
    """Get the token validator singleton."""
    global _validator_instance
    if _validator_instance is None:
        _validator_instance = TokenValidator()
    return _validator_instance


def reset_token_validator() -> None:
    """Reset the token validator singleton (for testing)."""
    global _validator_instance
    _validator_instance = None
