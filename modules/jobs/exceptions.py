"""
Jobs module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class JobNotFoundError(NotFoundError):
    """Raised when a job is not found."""

    def __init__(self, job_id: str):
        super().__init__(
            f"Job not found: {job_id}",
            code="JOB_NOT_FOUND",
            details={"job_id": job_id},
        )


class JobAccessDeniedError(AuthorizationError):
    """Raised when an employer touches a posting they do not own."""

    def __init__(self, job_id: str, employer_id: str):
        super().__init__(
            f"Access denied to job: {job_id}",
            code="JOB_ACCESS_DENIED",
            details={"job_id": job_id, "employer_id": employer_id},
        )
