"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Identity(BaseModel):
    """
    The authenticated principal, independent of role.

    Created by the auth provider at sign-up and immutable for the
    lifetime of a session.
    """

    id: str = Field(..., description="User ID (UUID from Supabase Auth)")
    email: str = Field(default="", description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class AuthSession(BaseModel):
    """
    An authentication session as reported by the auth provider.

    Only the parts this backend needs are kept: who is signed in and the
    tokens the browser client uses for subsequent requests.
    """

    identity: Identity
    access_token: Optional[str] = Field(None, description="JWT access token")
    refresh_token: Optional[str] = Field(None, description="Refresh token")
    expires_at: Optional[int] = Field(None, description="Access token expiry (unix time)")

    model_config = {"frozen": True}
