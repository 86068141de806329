"""
Applications module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from modules.jobs.models import Job


class ApplicationStatus(str, Enum):
    """Hiring pipeline stage, set by the employer."""

    PENDING = "pending"
    SHORTLISTED = "shortlisted"
    INTERVIEW = "interview"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ApplicantSummary(BaseModel):
    """Job seeker fields an employer sees on an application."""

    model_config = {"extra": "ignore"}

    full_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    experience_years: int = 0
    resume_url: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _null_skills(cls, value: Any) -> Any:
        return value or []

    @field_validator("experience_years", mode="before")
    @classmethod
    def _null_experience(cls, value: Any) -> Any:
        return value or 0


class Application(BaseModel):
    """
    An application to a job.

    ``job`` is filled from the embedded ``jobs`` relation and
    ``applicant`` from ``user_profiles`` when the query selects them.
    """

    model_config = {"extra": "ignore"}

    id: str
    job_id: str
    user_id: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    job: Optional[Job] = None
    applicant: Optional[ApplicantSummary] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Application":
        data = dict(row)
        job = data.pop("jobs", None)
        applicant = data.pop("user_profiles", None)
        if job:
            data["job"] = Job.from_row(job)
        if applicant:
            data["applicant"] = ApplicantSummary.model_validate(applicant)
        for key in ("id", "job_id", "user_id"):
            data[key] = str(data[key])
        return cls.model_validate(data)


class ApplyRequest(BaseModel):
    """A job seeker's application."""

    cover_letter: Optional[str] = Field(None, max_length=10000)


class StatusUpdateRequest(BaseModel):
    """An employer moving an application through the pipeline."""

    status: ApplicationStatus
