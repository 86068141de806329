"""
Admin module data models.
"""

from pydantic import BaseModel

from modules.jobs.models import JobStatus


class PlatformStats(BaseModel):
    """Platform-wide counts for the analytics panel."""

    total_users: int = 0
    total_employers: int = 0
    total_jobs: int = 0
    total_applications: int = 0
    approved_employers: int = 0
    pending_jobs: int = 0
    active_jobs: int = 0  # Approved and is_active


class ActiveUpdate(BaseModel):
    is_active: bool


class ApprovalUpdate(BaseModel):
    is_approved: bool


class JobStatusUpdate(BaseModel):
    status: JobStatus
