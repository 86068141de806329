"""
Application repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.jobs.repository import JOB_LISTING_COLUMNS
from .models import Application

# Applicant fields an employer may read
_APPLICANT_COLUMNS = (
    "full_name, email, phone, location, skills, experience_years, resume_url, bio"
)

_EMPLOYER_VIEW_COLUMNS = (
    f"*, jobs!inner(id, title, employer_id), user_profiles({_APPLICANT_COLUMNS})"
)


class ApplicationRepository(BaseRepository[Application]):
    """
    Repository for the ``applications`` table.

    Note: This repository does NOT perform authorization checks.
    """

    def create(self, data: dict[str, Any]) -> Application:
        result = self._execute(
            self._db.table("applications").insert(data),
            "applications",
        )
        return Application.from_row(result.data[0])

    def get_by_id(self, application_id: str) -> Optional[Application]:
        """Fetch an application with its job's id, title and owner."""
        result = self._execute(
            self._db.table("applications")
            .select("*, jobs!inner(id, title, employer_id)")
            .eq("id", application_id),
            "applications",
        )
        if not result.data:
            return None
        return Application.from_row(result.data[0])

    def list_for_user(self, user_id: str) -> list[Application]:
        """A job seeker's applications with job listings, newest first."""
        result = self._execute(
            self._db.table("applications")
            .select(f"*, jobs({JOB_LISTING_COLUMNS})")
            .eq("user_id", user_id)
            .order("applied_at", desc=True),
            "applications",
        )
        return [Application.from_row(row) for row in result.data or []]

    def list_for_employer(
        self,
        employer_id: str,
        job_id: Optional[str] = None,
    ) -> list[Application]:
        """Applications to an employer's jobs with applicant summaries."""
        query = (
            self._db.table("applications")
            .select(_EMPLOYER_VIEW_COLUMNS)
            .eq("jobs.employer_id", employer_id)
        )
        if job_id:
            query = query.eq("job_id", job_id)

        result = self._execute(query.order("applied_at", desc=True), "applications")
        return [Application.from_row(row) for row in result.data or []]

    def update_status(self, application_id: str, status: str) -> Optional[Application]:
        result = self._execute(
            self._db.table("applications")
            .update({"status": status, "updated_at": self._now()})
            .eq("id", application_id),
            "applications",
        )
        if not result.data:
            return None
        return Application.from_row(result.data[0])
