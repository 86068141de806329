"""
Admin repository for database access.

Platform-wide reads and moderation writes. Row-level security must
grant these to admin identities.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.auth.models import EmployerProfile, UserProfile
from modules.jobs.models import Job, JobStatus
from .models import PlatformStats


class AdminRepository(BaseRepository[PlatformStats]):
    """Repository for the admin panels."""

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------

    def count(self, table: str, **filters: Any) -> int:
        """Exact row count of ``table`` matching equality filters, without fetching rows."""
        query = self._db.table(table).select("id", count="exact", head=True)
        for column, value in filters.items():
            query = query.eq(column, value)
        result = self._execute(query, table)
        return result.count or 0

    def get_stats(self) -> PlatformStats:
        return PlatformStats(
            total_users=self.count("user_profiles"),
            total_employers=self.count("employer_profiles"),
            total_jobs=self.count("jobs"),
            total_applications=self.count("applications"),
            approved_employers=self.count("employer_profiles", is_approved=True),
            pending_jobs=self.count("jobs", status=JobStatus.PENDING.value),
            active_jobs=self.count(
                "jobs", status=JobStatus.APPROVED.value, is_active=True
            ),
        )

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_users(self, search: Optional[str] = None) -> list[UserProfile]:
        query = self._db.table("user_profiles").select("*")
        if search and search.strip():
            pattern = self._contains(search)
            query = query.or_(f"full_name.ilike.{pattern},email.ilike.{pattern}")
        result = self._execute(query.order("created_at", desc=True), "user_profiles")
        return [UserProfile.model_validate(self._str_id(r)) for r in result.data or []]

    def list_employers(self, search: Optional[str] = None) -> list[EmployerProfile]:
        query = self._db.table("employer_profiles").select("*")
        if search and search.strip():
            pattern = self._contains(search)
            query = query.or_(f"company_name.ilike.{pattern},email.ilike.{pattern}")
        result = self._execute(query.order("created_at", desc=True), "employer_profiles")
        return [EmployerProfile.model_validate(self._str_id(r)) for r in result.data or []]

    def list_jobs(
        self,
        search: Optional[str] = None,
        status: Optional[JobStatus] = None,
    ) -> list[Job]:
        query = self._db.table("jobs").select(
            "*, employer_profiles(company_name), job_categories(name)"
        )
        if search and search.strip():
            query = query.ilike("title", self._contains(search))
        if status is not None:
            query = query.eq("status", JobStatus(status).value)
        result = self._execute(query.order("created_at", desc=True), "jobs")
        return [Job.from_row(row) for row in result.data or []]

    # -------------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------------

    def update_row(
        self,
        table: str,
        record_id: str,
        data: dict[str, Any],
    ) -> Optional[dict[str, Any]]:
        """Update one row by id. Returns None if no row matched."""
        result = self._execute(
            self._db.table(table).update(data).eq("id", record_id),
            table,
        )
        if not result.data:
            return None
        return self._str_id(result.data[0])

    def update_job_status(self, job_id: str, status: JobStatus) -> Optional[dict[str, Any]]:
        return self.update_row(
            "jobs",
            job_id,
            {"status": JobStatus(status).value, "updated_at": self._now()},
        )

    @staticmethod
    def _str_id(row: dict[str, Any]) -> dict[str, Any]:
        return {**row, "id": str(row["id"])}
