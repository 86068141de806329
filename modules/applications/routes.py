"""
Application API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_application_service

from .interfaces import IApplicationService
from .models import Application, ApplyRequest, StatusUpdateRequest

router = APIRouter()


@router.post("/jobs/{job_id}", response_model=Application, status_code=201)
async def apply_to_job(
    job_id: str,
    request: ApplyRequest,
    service: IApplicationService = Depends(get_application_service),
) -> Application:
    """
    Apply to a job. The resume on the caller's profile is attached.

    Returns 409 if the caller already applied.
    """
    return await service.apply(job_id, request.cover_letter)


@router.get("/mine", response_model=list[Application])
async def list_my_applications(
    service: IApplicationService = Depends(get_application_service),
) -> list[Application]:
    return await service.list_my_applications()


@router.get("/applicants", response_model=list[Application])
async def list_applicants(
    job_id: Optional[str] = Query(default=None, description="Limit to one job"),
    service: IApplicationService = Depends(get_application_service),
) -> list[Application]:
    """Applications to the caller's jobs, newest first."""
    return await service.list_applicants(job_id)


@router.patch("/{application_id}/status", response_model=Application)
async def update_application_status(
    application_id: str,
    request: StatusUpdateRequest,
    service: IApplicationService = Depends(get_application_service),
) -> Application:
    return await service.update_status(application_id, request.status)
