"""
Profile API endpoints.
"""

from typing import Any
from fastapi import APIRouter, Body, Depends

from api.dependencies import get_profile_service
from modules.auth.models import Profile

from .service import ProfileService

router = APIRouter()


@router.put("", response_model=Profile)
async def update_my_profile(
    data: dict[str, Any] = Body(...),
    service: ProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Update the caller's profile.

    Job seekers send UserProfileUpdate fields, employers send
    EmployerProfileUpdate fields.
    """
    return await service.update_my_profile(data)
