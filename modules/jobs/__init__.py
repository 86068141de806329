"""
Jobs module.

Handles job search, job categories, saved jobs and employer postings.

Public API:
- IJobService: Interface for job operations
- Job, JobInput, JobSearchFilters: Job models
- Job exceptions: JobNotFoundError, JobAccessDeniedError
"""

from .interfaces import IJobService
from .models import (
    Currency,
    EmployerSummary,
    Job,
    JobCategory,
    JobInput,
    JobSearchFilters,
    JobStatus,
    JobType,
    SavedJob,
    SaveToggleResult,
)
from .exceptions import JobNotFoundError, JobAccessDeniedError

__all__ = [
    # Interface
    "IJobService",
    # Models
    "Currency",
    "EmployerSummary",
    "Job",
    "JobCategory",
    "JobInput",
    "JobSearchFilters",
    "JobStatus",
    "JobType",
    "SavedJob",
    "SaveToggleResult",
    # Exceptions
    "JobNotFoundError",
    "JobAccessDeniedError",
]
