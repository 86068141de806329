"""
Profiles module data models.

Editable subsets of the profile tables. Fields left out of a request
are left untouched.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, HttpUrl, field_validator

from modules.auth.models import Role
from modules.jobs.models import split_skills


# Choices offered by the company profile form
COMPANY_SIZES = ("1-10", "11-50", "51-200", "201-500", "501-1000", "1000+")


class UserProfileUpdate(BaseModel):
    """Fields a job seeker may edit."""

    model_config = {"extra": "forbid"}

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=5000)
    skills: Optional[list[str]] = None
    experience_years: Optional[int] = Field(None, ge=0, le=80)
    resume_url: Optional[HttpUrl] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value: Any) -> Any:
        return split_skills(value)


class EmployerProfileUpdate(BaseModel):
    """Fields an employer may edit on their company profile."""

    model_config = {"extra": "forbid"}

    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    phone: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    website: Optional[HttpUrl] = None
    description: Optional[str] = Field(None, max_length=5000)
    logo_url: Optional[HttpUrl] = None

    @field_validator("company_size")
    @classmethod
    def _known_size(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in COMPANY_SIZES:
            raise ValueError(f"company_size must be one of {', '.join(COMPANY_SIZES)}")
        return value


UPDATE_MODELS: dict[Role, type[BaseModel]] = {
    Role.USER: UserProfileUpdate,
    Role.EMPLOYER: EmployerProfileUpdate,
}
