"""
Job API endpoints.

Search and saved jobs for job seekers, posting management for employers.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_job_service

from .interfaces import IJobService
from .models import Job, JobCategory, JobInput, JobSearchFilters, SavedJob, SaveToggleResult

router = APIRouter()


@router.get("", response_model=list[Job])
async def search_jobs(
    keyword: Optional[str] = Query(default=None, description="Title or description"),
    location: Optional[str] = Query(default=None),
    category_id: Optional[str] = Query(default=None),
    service: IJobService = Depends(get_job_service),
) -> list[Job]:
    """
    Search approved, active jobs, newest first.
    """
    filters = JobSearchFilters(keyword=keyword, location=location, category_id=category_id)
    return await service.search_jobs(filters)


@router.get("/categories", response_model=list[JobCategory])
async def list_categories(service: IJobService = Depends(get_job_service)) -> list[JobCategory]:
    return await service.list_categories()


# Saved jobs (job seekers)


@router.get("/saved", response_model=list[SavedJob])
async def list_saved_jobs(service: IJobService = Depends(get_job_service)) -> list[SavedJob]:
    """The caller's saved jobs, most recently saved first."""
    return await service.list_saved_jobs()


@router.get("/saved/ids", response_model=list[str])
async def saved_job_ids(service: IJobService = Depends(get_job_service)) -> list[str]:
    return sorted(await service.saved_job_ids())


@router.post("/saved/{job_id}/toggle", response_model=SaveToggleResult)
async def toggle_saved(
    job_id: str,
    service: IJobService = Depends(get_job_service),
) -> SaveToggleResult:
    saved = await service.toggle_saved(job_id)
    return SaveToggleResult(job_id=job_id, saved=saved)


@router.delete("/saved/{job_id}", status_code=204)
async def remove_saved(job_id: str, service: IJobService = Depends(get_job_service)) -> None:
    await service.remove_saved(job_id)


# Postings (employers)


@router.get("/postings", response_model=list[Job])
async def list_postings(service: IJobService = Depends(get_job_service)) -> list[Job]:
    """The caller's own postings in every status."""
    return await service.list_postings()


@router.post("/postings", response_model=Job, status_code=201)
async def create_posting(
    request: JobInput,
    service: IJobService = Depends(get_job_service),
) -> Job:
    """
    Create a posting.

    New postings wait in 'pending' until an administrator approves them.
    """
    return await service.create_posting(request)


@router.put("/postings/{job_id}", response_model=Job)
async def update_posting(
    job_id: str,
    request: JobInput,
    service: IJobService = Depends(get_job_service),
) -> Job:
    """Update an own posting. It goes back to 'pending' for review."""
    return await service.update_posting(job_id, request)


@router.delete("/postings/{job_id}", status_code=204)
async def delete_posting(job_id: str, service: IJobService = Depends(get_job_service)) -> None:
    await service.delete_posting(job_id)


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, service: IJobService = Depends(get_job_service)) -> Job:
    return await service.get_job(job_id)
