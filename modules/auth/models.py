"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the session context.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.models import Identity


class Role(str, Enum):
    """Role of a signed-in identity. An unresolved role is ``None``."""

    USER = "user"          # Job seeker
    EMPLOYER = "employer"
    ADMIN = "admin"


# Lookup order for role resolution; the first table with a row wins.
ROLE_PRIORITY: tuple[Role, ...] = (Role.ADMIN, Role.EMPLOYER, Role.USER)

PROFILE_TABLES: dict[Role, str] = {
    Role.ADMIN: "admin_profiles",
    Role.EMPLOYER: "employer_profiles",
    Role.USER: "user_profiles",
}

# Columns copied from sign-up form data into the new profile row.
# Admin profiles are provisioned out-of-band.
SIGN_UP_COLUMNS: dict[Role, tuple[str, ...]] = {
    Role.USER: ("full_name", "phone", "location"),
    Role.EMPLOYER: ("company_name", "phone", "location", "industry"),
}


class SessionState(str, Enum):
    """Lifecycle state of a session context."""

    INITIALIZING = "initializing"
    RESOLVING = "resolving"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class UserProfile(BaseModel):
    """Job seeker profile (``user_profiles``)."""

    model_config = {"extra": "ignore"}

    id: str
    full_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    experience_years: int = 0
    resume_url: Optional[str] = None
    bio: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _null_skills(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("experience_years", mode="before")
    @classmethod
    def _null_experience(cls, value: Any) -> Any:
        return 0 if value is None else value


class EmployerProfile(BaseModel):
    """Employer / company profile (``employer_profiles``)."""

    model_config = {"extra": "ignore"}

    id: str
    company_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    is_approved: bool = False  # New employers wait for admin approval
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdminProfile(BaseModel):
    """Administrator profile (``admin_profiles``)."""

    model_config = {"extra": "ignore"}

    id: str
    full_name: str = ""
    email: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None


ProfileData = Union[UserProfile, EmployerProfile, AdminProfile]

PROFILE_MODELS: dict[Role, type[BaseModel]] = {
    Role.USER: UserProfile,
    Role.EMPLOYER: EmployerProfile,
    Role.ADMIN: AdminProfile,
}


class Profile(BaseModel):
    """
    Role-tagged profile.

    The role travels with the data, so consumers branch on ``role``
    instead of probing for fields such as ``company_name``.
    """

    role: Role
    data: ProfileData

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _parse_data_for_role(cls, values: Any) -> Any:
        # The three row models accept each other's dicts; let the role pick
        if isinstance(values, dict) and isinstance(values.get("data"), dict):
            role = values.get("role")
            if role is not None:
                data = PROFILE_MODELS[Role(role)].model_validate(values["data"])
                values = {**values, "data": data}
        return values

    @model_validator(mode="after")
    def _data_matches_role(self) -> "Profile":
        expected = PROFILE_MODELS[self.role]
        if not isinstance(self.data, expected):
            raise ValueError(
                f"{self.role.value} profile requires {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
        return self

    @property
    def id(self) -> str:
        return self.data.id

    @property
    def display_name(self) -> str:
        if isinstance(self.data, EmployerProfile):
            return self.data.company_name
        return self.data.full_name


class SessionSnapshot(BaseModel):
    """
    Point-in-time view of a session context.

    Handed to listeners and API responses; consumers never see the
    mutable context state directly.
    """

    state: SessionState
    identity: Optional[Identity] = None
    role: Optional[Role] = None
    profile: Optional[Profile] = None
    loading: bool = False
    error: Optional[str] = Field(None, description="Last resolution error, if any")

    model_config = {"frozen": True}
