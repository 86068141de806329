"""
Profiles module.

Job seekers and employers edit their own profile rows.
"""

from .models import COMPANY_SIZES, EmployerProfileUpdate, UserProfileUpdate
from .exceptions import InvalidProfileUpdateError, ProfileNotFoundError

__all__ = [
    "COMPANY_SIZES",
    "EmployerProfileUpdate",
    "UserProfileUpdate",
    "InvalidProfileUpdateError",
    "ProfileNotFoundError",
]
