"""
Auth request and response models.
"""

from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field, model_validator

from modules.auth.models import SessionSnapshot
from shared.models import Identity


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SignUpRequest(BaseModel):
    """
    Self-service sign-up.

    Only job seekers and employers can sign up; administrators are
    provisioned out-of-band.
    """

    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Literal["user", "employer"]
    full_name: Optional[str] = None
    company_name: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None

    @model_validator(mode="after")
    def _name_for_role(self) -> "SignUpRequest":
        if self.role == "user" and not (self.full_name and self.full_name.strip()):
            raise ValueError("full_name is required for job seekers")
        if self.role == "employer" and not (self.company_name and self.company_name.strip()):
            raise ValueError("company_name is required for employers")
        return self

    def profile_data(self) -> dict[str, Optional[str]]:
        return self.model_dump(exclude={"email", "password", "role"})


class AuthResponse(BaseModel):
    """Tokens for the browser client plus the settled session."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    session: SessionSnapshot


class SignUpResponse(AuthResponse):
    """
    Sign-up result.

    Tokens are absent when the provider requires email confirmation
    before the first sign-in.
    """

    identity: Identity
