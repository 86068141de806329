"""
Job repository for database access.

Encapsulates Supabase queries for the job tables:
- jobs
- job_categories
- saved_jobs
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Job, JobCategory, JobSearchFilters, JobStatus, SavedJob

# Listing shape used by search, saved jobs and applications
JOB_LISTING_COLUMNS = "*, employer_profiles(company_name, logo_url), job_categories(name)"


class JobRepository(BaseRepository[Job]):
    """
    Repository for jobs and job categories.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def search(self, filters: JobSearchFilters) -> list[Job]:
        """Approved, active jobs matching the filters, newest first."""
        query = (
            self._db.table("jobs")
            .select(JOB_LISTING_COLUMNS)
            .eq("status", JobStatus.APPROVED.value)
            .eq("is_active", True)
        )

        if filters.keyword and filters.keyword.strip():
            pattern = self._contains(filters.keyword)
            query = query.or_(f"title.ilike.{pattern},description.ilike.{pattern}")
        if filters.location and filters.location.strip():
            query = query.ilike("location", self._contains(filters.location))
        if filters.category_id:
            query = query.eq("category_id", filters.category_id)

        result = self._execute(query.order("created_at", desc=True), "jobs")
        return [Job.from_row(row) for row in result.data or []]

    def get_by_id(self, job_id: str) -> Optional[Job]:
        result = self._execute(
            self._db.table("jobs").select(JOB_LISTING_COLUMNS).eq("id", job_id),
            "jobs",
        )
        if not result.data:
            return None
        return Job.from_row(result.data[0])

    def list_by_employer(self, employer_id: str) -> list[Job]:
        result = self._execute(
            self._db.table("jobs")
            .select("*, job_categories(name)")
            .eq("employer_id", employer_id)
            .order("created_at", desc=True),
            "jobs",
        )
        return [Job.from_row(row) for row in result.data or []]

    def create(self, data: dict[str, Any]) -> Job:
        """Insert a posting. ``updated_at`` is stamped here."""
        row = {**data, "updated_at": self._now()}
        result = self._execute(self._db.table("jobs").insert(row), "jobs")
        return Job.from_row(result.data[0])

    def update(self, job_id: str, data: dict[str, Any]) -> Optional[Job]:
        """Update a posting. Returns None if no row matched."""
        row = {**data, "updated_at": self._now()}
        result = self._execute(
            self._db.table("jobs").update(row).eq("id", job_id),
            "jobs",
        )
        if not result.data:
            return None
        return Job.from_row(result.data[0])

    def delete(self, job_id: str) -> None:
        self._execute(self._db.table("jobs").delete().eq("id", job_id), "jobs")

    def list_categories(self) -> list[JobCategory]:
        result = self._execute(
            self._db.table("job_categories").select("id, name").order("name"),
            "job_categories",
        )
        return [JobCategory.model_validate({**r, "id": str(r["id"])}) for r in result.data or []]


class SavedJobRepository(BaseRepository[SavedJob]):
    """Repository for a job seeker's saved jobs."""

    def list_job_ids(self, user_id: str) -> set[str]:
        result = self._execute(
            self._db.table("saved_jobs").select("job_id").eq("user_id", user_id),
            "saved_jobs",
        )
        return {str(row["job_id"]) for row in result.data or []}

    def list_saved(self, user_id: str) -> list[SavedJob]:
        """Saved jobs with listing details, most recently saved first."""
        result = self._execute(
            self._db.table("saved_jobs")
            .select(f"saved_at, jobs({JOB_LISTING_COLUMNS})")
            .eq("user_id", user_id)
            .order("saved_at", desc=True),
            "saved_jobs",
        )

        saved = []
        for row in result.data or []:
            # A job hidden by row-level security comes back as null
            if not row.get("jobs"):
                continue
            saved.append(SavedJob(job=Job.from_row(row["jobs"]), saved_at=row["saved_at"]))
        return saved

    def add(self, user_id: str, job_id: str) -> None:
        self._execute(
            self._db.table("saved_jobs").insert({"user_id": user_id, "job_id": job_id}),
            "saved_jobs",
        )

    def remove(self, user_id: str, job_id: str) -> None:
        self._execute(
            self._db.table("saved_jobs").delete().eq("user_id", user_id).eq("job_id", job_id),
            "saved_jobs",
        )
