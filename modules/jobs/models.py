"""
Jobs module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class JobStatus(str, Enum):
    """Moderation status of a posting."""

    DRAFT = "draft"
    PENDING = "pending"      # Awaiting admin review
    APPROVED = "approved"    # Visible in search
    REJECTED = "rejected"
    CLOSED = "closed"
    EXPIRED = "expired"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    REMOTE = "remote"
    HYBRID = "hybrid"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


def split_skills(value: Any) -> Any:
    """Accept skills as a list or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return value


class JobCategory(BaseModel):
    """A row of ``job_categories``."""

    model_config = {"extra": "ignore"}

    id: str
    name: str


class EmployerSummary(BaseModel):
    """Employer fields embedded in job listings."""

    model_config = {"extra": "ignore"}

    company_name: str = ""
    logo_url: Optional[str] = None


class Job(BaseModel):
    """
    A job posting.

    ``employer`` and ``category_name`` are filled from the embedded
    ``employer_profiles`` and ``job_categories`` relations when the
    query selects them.
    """

    model_config = {"extra": "ignore"}

    id: str
    employer_id: str
    category_id: Optional[str] = None
    title: str
    description: str = ""
    requirements: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_required: int = 0
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: str = Currency.USD.value
    skills_required: list[str] = Field(default_factory=list)
    status: JobStatus = JobStatus.PENDING
    expires_at: Optional[datetime] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    employer: Optional[EmployerSummary] = None
    category_name: Optional[str] = None

    @field_validator("skills_required", mode="before")
    @classmethod
    def _split_skills(cls, value: Any) -> Any:
        return split_skills(value)

    @field_validator("experience_required", mode="before")
    @classmethod
    def _null_experience(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Job":
        """Build a Job from a row with optional embedded relations."""
        data = dict(row)
        employer = data.pop("employer_profiles", None)
        category = data.pop("job_categories", None)
        if employer:
            data["employer"] = EmployerSummary.model_validate(employer)
        if category:
            data["category_name"] = category.get("name")
        data["id"] = str(data["id"])
        return cls.model_validate(data)


class JobSearchFilters(BaseModel):
    """Filters for the public job search."""

    keyword: Optional[str] = Field(None, description="Matches title or description")
    location: Optional[str] = Field(None, description="Substring of the job location")
    category_id: Optional[str] = None


class JobInput(BaseModel):
    """Employer-submitted fields for creating or updating a posting."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    requirements: Optional[str] = None
    location: str = Field(..., min_length=1)
    job_type: JobType = JobType.FULL_TIME
    experience_required: int = Field(default=0, ge=0)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: Currency = Currency.USD
    skills_required: list[str] = Field(default_factory=list)
    category_id: Optional[str] = None

    @field_validator("skills_required", mode="before")
    @classmethod
    def _split_skills(cls, value: Any) -> Any:
        return split_skills(value)

    @field_validator("category_id", mode="before")
    @classmethod
    def _blank_category(cls, value: Any) -> Any:
        return value or None

    @model_validator(mode="after")
    def _salary_range(self) -> "JobInput":
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_max < self.salary_min
        ):
            raise ValueError("salary_max must not be less than salary_min")
        return self


class SavedJob(BaseModel):
    """A job on a seeker's saved list."""

    job: Job
    saved_at: datetime


class SaveToggleResult(BaseModel):
    job_id: str
    saved: bool
