"""
Admin API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_admin_service
from modules.auth.models import EmployerProfile, UserProfile
from modules.jobs.models import Job, JobStatus

from .models import ActiveUpdate, ApprovalUpdate, JobStatusUpdate, PlatformStats
from .service import AdminService

router = APIRouter()


@router.get("/stats", response_model=PlatformStats)
async def get_stats(service: AdminService = Depends(get_admin_service)) -> PlatformStats:
    return await service.get_stats()


@router.get("/users", response_model=list[UserProfile])
async def list_users(
    search: Optional[str] = Query(default=None, description="Name or email"),
    service: AdminService = Depends(get_admin_service),
) -> list[UserProfile]:
    return await service.list_users(search)


@router.patch("/users/{user_id}/active", response_model=UserProfile)
async def set_user_active(
    user_id: str,
    request: ActiveUpdate,
    service: AdminService = Depends(get_admin_service),
) -> UserProfile:
    return await service.set_user_active(user_id, request.is_active)


@router.get("/employers", response_model=list[EmployerProfile])
async def list_employers(
    search: Optional[str] = Query(default=None, description="Company name or email"),
    service: AdminService = Depends(get_admin_service),
) -> list[EmployerProfile]:
    return await service.list_employers(search)


@router.patch("/employers/{employer_id}/approval", response_model=EmployerProfile)
async def set_employer_approved(
    employer_id: str,
    request: ApprovalUpdate,
    service: AdminService = Depends(get_admin_service),
) -> EmployerProfile:
    return await service.set_employer_approved(employer_id, request.is_approved)


@router.patch("/employers/{employer_id}/active", response_model=EmployerProfile)
async def set_employer_active(
    employer_id: str,
    request: ActiveUpdate,
    service: AdminService = Depends(get_admin_service),
) -> EmployerProfile:
    return await service.set_employer_active(employer_id, request.is_active)


@router.get("/jobs", response_model=list[Job])
async def list_jobs(
    search: Optional[str] = Query(default=None, description="Job title"),
    status: Optional[JobStatus] = Query(default=None),
    service: AdminService = Depends(get_admin_service),
) -> list[Job]:
    return await service.list_jobs(search, status)


@router.patch("/jobs/{job_id}/status", response_model=Job)
async def set_job_status(
    job_id: str,
    request: JobStatusUpdate,
    service: AdminService = Depends(get_admin_service),
) -> Job:
    return await service.set_job_status(job_id, request.status)
