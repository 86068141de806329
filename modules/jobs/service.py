"""
Jobs service implementation.

Job search for any signed-in role, saved jobs for job seekers and
posting management for employers.
"""

from typing import Optional

from modules.auth.guards import require_identity, require_role
from modules.auth.models import Role
from modules.auth.session import SessionContext

from .exceptions import JobAccessDeniedError, JobNotFoundError
from .interfaces import IJobService
from .models import Job, JobCategory, JobInput, JobSearchFilters, JobStatus, SavedJob
from .repository import JobRepository, SavedJobRepository


class JobService(IJobService):
    """Job operations for the caller described by a session context."""

    def __init__(
        self,
        jobs: JobRepository,
        saved: SavedJobRepository,
        session: SessionContext,
    ):
        self._jobs = jobs
        self._saved = saved
        self._session = session

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    async def search_jobs(self, filters: Optional[JobSearchFilters] = None) -> list[Job]:
        require_identity(self._session)
        return self._jobs.search(filters or JobSearchFilters())

    async def get_job(self, job_id: str) -> Job:
        require_identity(self._session)
        job = self._jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def list_categories(self) -> list[JobCategory]:
        require_identity(self._session)
        return self._jobs.list_categories()

    # -------------------------------------------------------------------------
    # Saved jobs
    # -------------------------------------------------------------------------

    async def saved_job_ids(self) -> set[str]:
        profile = require_role(self._session, Role.USER)
        return self._saved.list_job_ids(profile.id)

    async def list_saved_jobs(self) -> list[SavedJob]:
        profile = require_role(self._session, Role.USER)
        return self._saved.list_saved(profile.id)

    async def toggle_saved(self, job_id: str) -> bool:
        profile = require_role(self._session, Role.USER)

        if job_id in self._saved.list_job_ids(profile.id):
            self._saved.remove(profile.id, job_id)
            return False

        if self._jobs.get_by_id(job_id) is None:
            raise JobNotFoundError(job_id)
        self._saved.add(profile.id, job_id)
        return True

    async def remove_saved(self, job_id: str) -> None:
        profile = require_role(self._session, Role.USER)
        self._saved.remove(profile.id, job_id)

    # -------------------------------------------------------------------------
    # Postings
    # -------------------------------------------------------------------------

    async def list_postings(self) -> list[Job]:
        profile = require_role(self._session, Role.EMPLOYER)
        return self._jobs.list_by_employer(profile.id)

    async def create_posting(self, data: JobInput) -> Job:
        profile = require_role(self._session, Role.EMPLOYER)
        return self._jobs.create(self._posting_row(data, profile.id))

    async def update_posting(self, job_id: str, data: JobInput) -> Job:
        profile = require_role(self._session, Role.EMPLOYER)
        self._owned_job(job_id, profile.id)

        job = self._jobs.update(job_id, self._posting_row(data, profile.id))
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def delete_posting(self, job_id: str) -> None:
        profile = require_role(self._session, Role.EMPLOYER)
        self._owned_job(job_id, profile.id)
        self._jobs.delete(job_id)

    def _owned_job(self, job_id: str, employer_id: str) -> Job:
        job = self._jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        if job.employer_id != employer_id:
            raise JobAccessDeniedError(job_id, employer_id)
        return job

    @staticmethod
    def _posting_row(data: JobInput, employer_id: str) -> dict:
        # Every edit goes back through moderation
        row = data.model_dump(mode="json")
        row["employer_id"] = employer_id
        row["status"] = JobStatus.PENDING.value
        return row
