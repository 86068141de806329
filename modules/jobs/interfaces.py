"""
Jobs module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Job, JobCategory, JobInput, JobSearchFilters, SavedJob


@runtime_checkable
class IJobService(Protocol):
    """
    Interface for job search, saved jobs and employer postings.

    Every method gates on the caller's role through the session context.
    """

    async def search_jobs(self, filters: Optional[JobSearchFilters] = None) -> list[Job]:
        """Search approved, active jobs. Any signed-in role."""
        ...

    async def get_job(self, job_id: str) -> Job:
        ...

    async def list_categories(self) -> list[JobCategory]:
        ...

    async def saved_job_ids(self) -> set[str]:
        ...

    async def list_saved_jobs(self) -> list[SavedJob]:
        ...

    async def toggle_saved(self, job_id: str) -> bool:
        """
        Save or unsave a job for the signed-in job seeker.

        Returns:
            True if the job is saved afterwards
        """
        ...

    async def remove_saved(self, job_id: str) -> None:
        ...

    async def list_postings(self) -> list[Job]:
        ...

    async def create_posting(self, data: JobInput) -> Job:
        """Create a posting; it enters moderation as PENDING."""
        ...

    async def update_posting(self, job_id: str, data: JobInput) -> Job:
        """Update an own posting; it re-enters moderation as PENDING."""
        ...

    async def delete_posting(self, job_id: str) -> None:
        ...
