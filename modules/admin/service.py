"""
Admin service implementation.

Analytics and moderation for users, employers and job postings.
Every operation requires the admin role.
"""

import logging
from typing import Optional

from modules.auth.guards import require_role
from modules.auth.models import EmployerProfile, Role, UserProfile
from modules.auth.session import SessionContext
from modules.jobs.models import Job, JobStatus

from .exceptions import RecordNotFoundError
from .models import PlatformStats
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class AdminService:
    """Admin panel operations for the caller described by a session context."""

    def __init__(self, repository: AdminRepository, session: SessionContext):
        self._repo = repository
        self._session = session

    async def get_stats(self) -> PlatformStats:
        require_role(self._session, Role.ADMIN)
        return self._repo.get_stats()

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def list_users(self, search: Optional[str] = None) -> list[UserProfile]:
        require_role(self._session, Role.ADMIN)
        return self._repo.list_users(search)

    async def set_user_active(self, user_id: str, is_active: bool) -> UserProfile:
        admin = require_role(self._session, Role.ADMIN)
        row = self._repo.update_row("user_profiles", user_id, {"is_active": is_active})
        if row is None:
            raise RecordNotFoundError("user", user_id)
        logger.info("Admin %s set user %s active=%s", admin.id, user_id, is_active)
        return UserProfile.model_validate(row)

    # -------------------------------------------------------------------------
    # Employers
    # -------------------------------------------------------------------------

    async def list_employers(self, search: Optional[str] = None) -> list[EmployerProfile]:
        require_role(self._session, Role.ADMIN)
        return self._repo.list_employers(search)

    async def set_employer_approved(
        self,
        employer_id: str,
        approved: bool,
    ) -> EmployerProfile:
        admin = require_role(self._session, Role.ADMIN)
        row = self._repo.update_row(
            "employer_profiles", employer_id, {"is_approved": approved}
        )
        if row is None:
            raise RecordNotFoundError("employer", employer_id)
        logger.info("Admin %s set employer %s approved=%s", admin.id, employer_id, approved)
        return EmployerProfile.model_validate(row)

    async def set_employer_active(
        self,
        employer_id: str,
        is_active: bool,
    ) -> EmployerProfile:
        admin = require_role(self._session, Role.ADMIN)
        row = self._repo.update_row(
            "employer_profiles", employer_id, {"is_active": is_active}
        )
        if row is None:
            raise RecordNotFoundError("employer", employer_id)
        logger.info("Admin %s set employer %s active=%s", admin.id, employer_id, is_active)
        return EmployerProfile.model_validate(row)

    # -------------------------------------------------------------------------
    # Jobs
    # -------------------------------------------------------------------------

    async def list_jobs(
        self,
        search: Optional[str] = None,
        status: Optional[JobStatus] = None,
    ) -> list[Job]:
        require_role(self._session, Role.ADMIN)
        return self._repo.list_jobs(search, status)

    async def set_job_status(self, job_id: str, status: JobStatus) -> Job:
        admin = require_role(self._session, Role.ADMIN)
        status = JobStatus(status)
        row = self._repo.update_job_status(job_id, status)
        if row is None:
            raise RecordNotFoundError("job", job_id)
        logger.info("Admin %s set job %s status=%s", admin.id, job_id, status.value)
        return Job.from_row(row)
