"""
Applications module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class ApplicationNotFoundError(NotFoundError):
    """Raised when an application is not found."""

    def __init__(self, application_id: str):
        super().__init__(
            f"Application not found: {application_id}",
            code="APPLICATION_NOT_FOUND",
            details={"application_id": application_id},
        )


class ApplicationAccessDeniedError(AuthorizationError):
    """Raised when an employer touches an application to someone else's job."""

    def __init__(self, application_id: str, employer_id: str):
        super().__init__(
            f"Access denied to application: {application_id}",
            code="APPLICATION_ACCESS_DENIED",
            details={"application_id": application_id, "employer_id": employer_id},
        )


class AlreadyAppliedError(ValidationError):
    """Raised when a job seeker applies to the same job twice."""

    def __init__(self, job_id: str):
        super().__init__(
            "You have already applied to this job",
            code="ALREADY_APPLIED",
            details={"job_id": job_id},
        )
