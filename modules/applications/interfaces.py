"""
Applications module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Application, ApplicationStatus


@runtime_checkable
class IApplicationService(Protocol):
    """Interface for applying to jobs and reviewing applicants."""

    async def apply(self, job_id: str, cover_letter: Optional[str] = None) -> Application:
        """
        Apply to a job as the signed-in job seeker.

        The resume URL is taken from the seeker's profile.

        Raises:
            JobNotFoundError: If the job is not open for applications
            AlreadyAppliedError: If the seeker already applied
        """
        ...

    async def list_my_applications(self) -> list[Application]:
        ...

    async def list_applicants(self, job_id: Optional[str] = None) -> list[Application]:
        """Applications to the signed-in employer's jobs."""
        ...

    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> Application:
        ...
