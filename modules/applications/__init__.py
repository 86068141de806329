"""
Applications module.

Job seekers apply to jobs; employers review applicants and move them
through the hiring pipeline.
"""

from .interfaces import IApplicationService
from .models import (
    ApplicantSummary,
    Application,
    ApplicationStatus,
    ApplyRequest,
    StatusUpdateRequest,
)
from .exceptions import (
    AlreadyAppliedError,
    ApplicationAccessDeniedError,
    ApplicationNotFoundError,
)

__all__ = [
    "IApplicationService",
    "ApplicantSummary",
    "Application",
    "ApplicationStatus",
    "ApplyRequest",
    "StatusUpdateRequest",
    "AlreadyAppliedError",
    "ApplicationAccessDeniedError",
    "ApplicationNotFoundError",
]
