"""
Applications service implementation.
"""

import logging
from typing import Optional

from shared.exceptions import QueryError
from modules.auth.guards import require_role
from modules.auth.models import Role, UserProfile
from modules.auth.session import SessionContext
from modules.jobs.exceptions import JobNotFoundError
from modules.jobs.models import JobStatus
from modules.jobs.repository import JobRepository

from .exceptions import (
    AlreadyAppliedError,
    ApplicationAccessDeniedError,
    ApplicationNotFoundError,
)
from .interfaces import IApplicationService
from .models import Application, ApplicationStatus
from .repository import ApplicationRepository

logger = logging.getLogger(__name__)

# Postgres unique_violation
_UNIQUE_VIOLATION = "23505"


class ApplicationService(IApplicationService):
    """Application operations for the caller described by a session context."""

    def __init__(
        self,
        applications: ApplicationRepository,
        jobs: JobRepository,
        session: SessionContext,
    ):
        self._applications = applications
        self._jobs = jobs
        self._session = session

    async def apply(self, job_id: str, cover_letter: Optional[str] = None) -> Application:
        profile = require_role(self._session, Role.USER)
        seeker: UserProfile = profile.data

        job = self._jobs.get_by_id(job_id)
        if job is None or job.status != JobStatus.APPROVED or not job.is_active:
            raise JobNotFoundError(job_id)

        try:
            return self._applications.create({
                "job_id": job_id,
                "user_id": seeker.id,
                "cover_letter": cover_letter,
                "resume_url": seeker.resume_url,
            })
        except QueryError as e:
            if e.code == _UNIQUE_VIOLATION:
                raise AlreadyAppliedError(job_id) from e
            raise

    async def list_my_applications(self) -> list[Application]:
        profile = require_role(self._session, Role.USER)
        return self._applications.list_for_user(profile.id)

    async def list_applicants(self, job_id: Optional[str] = None) -> list[Application]:
        profile = require_role(self._session, Role.EMPLOYER)
        return self._applications.list_for_employer(profile.id, job_id)

    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> Application:
        profile = require_role(self._session, Role.EMPLOYER)

        application = self._applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        if application.job is None or application.job.employer_id != profile.id:
            raise ApplicationAccessDeniedError(application_id, profile.id)

        updated = self._applications.update_status(
            application_id, ApplicationStatus(status).value
        )
        if updated is None:
            raise ApplicationNotFoundError(application_id)

        logger.info("Application %s moved to %s", application_id, updated.status.value)
        return updated
