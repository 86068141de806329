"""
Bearer token authentication.

Validates Supabase JWT access tokens before any per-request Supabase
client is built with them.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.tokens import get_token_validator

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Dependency that requires a valid access token and returns it.

    Usage:
        @router.get("/protected")
        async def protected_route(token: str = Depends(get_access_token)):
            ...

    Raises:
        MissingTokenError / ExpiredTokenError / InvalidTokenError
    """
    token = credentials.credentials if credentials is not None else None
    await get_token_validator().validate_token(token)
    return token
