"""
Admin module.

Platform analytics and moderation of users, employers and jobs.
"""

from .models import ActiveUpdate, ApprovalUpdate, JobStatusUpdate, PlatformStats
from .exceptions import RecordNotFoundError

__all__ = [
    "ActiveUpdate",
    "ApprovalUpdate",
    "JobStatusUpdate",
    "PlatformStats",
    "RecordNotFoundError",
]
