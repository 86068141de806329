"""Tests for the admin repository."""

import httpx
import pytest

from modules.admin.models import PlatformStats
from modules.admin.repository import AdminRepository
from modules.jobs.models import JobStatus
from shared.exceptions import QueryError


class TestCounts:
    def test_count_is_exact_head_only(self, mock_db):
        mock_db.query.execute.return_value.count = 12

        assert AdminRepository(mock_db).count("jobs", status="pending") == 12

        mock_db.table.assert_called_once_with("jobs")
        mock_db.query.select.assert_called_once_with("id", count="exact", head=True)
        mock_db.query.eq.assert_called_once_with("status", "pending")

    def test_count_none_is_zero(self, mock_db):
        assert AdminRepository(mock_db).count("jobs") == 0
        mock_db.query.eq.assert_not_called()

    def test_stats(self, mock_db):
        mock_db.query.execute.return_value.count = 3

        stats = AdminRepository(mock_db).get_stats()

        assert stats == PlatformStats(
            total_users=3,
            total_employers=3,
            total_jobs=3,
            total_applications=3,
            approved_employers=3,
            pending_jobs=3,
            active_jobs=3,
        )
        tables = [call.args[0] for call in mock_db.table.call_args_list]
        assert tables == [
            "user_profiles",
            "employer_profiles",
            "jobs",
            "applications",
            "employer_profiles",
            "jobs",
            "jobs",
        ]
        mock_db.query.eq.assert_any_call("is_approved", True)
        mock_db.query.eq.assert_any_call("status", "approved")
        mock_db.query.eq.assert_any_call("is_active", True)

    def test_count_failure_names_table(self, mock_db):
        mock_db.query.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(QueryError) as exc_info:
            AdminRepository(mock_db).get_stats()

        assert exc_info.value.table == "user_profiles"


class TestListings:
    def test_list_users_search(self, mock_db):
        mock_db.query.execute.return_value.data = [{"id": 7, "full_name": "Sam"}]

        users = AdminRepository(mock_db).list_users("sam")

        mock_db.table.assert_called_once_with("user_profiles")
        mock_db.query.or_.assert_called_once_with("full_name.ilike.%sam%,email.ilike.%sam%")
        mock_db.query.order.assert_called_once_with("created_at", desc=True)
        assert users[0].id == "7"
        assert users[0].full_name == "Sam"

    def test_list_users_without_search(self, mock_db):
        assert AdminRepository(mock_db).list_users("  ") == []
        mock_db.query.or_.assert_not_called()

    def test_list_employers_search(self, mock_db):
        mock_db.query.execute.return_value.data = [
            {"id": 9, "company_name": "Acme Corp", "is_approved": False}
        ]

        employers = AdminRepository(mock_db).list_employers("acme")

        mock_db.table.assert_called_once_with("employer_profiles")
        mock_db.query.or_.assert_called_once_with(
            "company_name.ilike.%acme%,email.ilike.%acme%"
        )
        assert employers[0].id == "9"
        assert employers[0].is_approved is False

    def test_search_syntax_is_stripped(self, mock_db):
        AdminRepository(mock_db).list_employers("acme,is_approved.eq.true")

        expression = mock_db.query.or_.call_args.args[0]
        assert expression.count(",") == 1

    def test_list_jobs_by_title_and_status(self, mock_db):
        mock_db.query.execute.return_value.data = [
            {"id": 4, "employer_id": "e1", "title": "Engineer", "status": "pending"}
        ]

        jobs = AdminRepository(mock_db).list_jobs("engineer", JobStatus.PENDING)

        mock_db.query.select.assert_called_once_with(
            "*, employer_profiles(company_name), job_categories(name)"
        )
        mock_db.query.ilike.assert_called_once_with("title", "%engineer%")
        mock_db.query.eq.assert_called_once_with("status", "pending")
        assert jobs[0].id == "4"
        assert jobs[0].status is JobStatus.PENDING

    def test_list_jobs_unfiltered(self, mock_db):
        AdminRepository(mock_db).list_jobs()

        mock_db.query.ilike.assert_not_called()
        mock_db.query.eq.assert_not_called()


class TestModeration:
    def test_update_row(self, mock_db):
        mock_db.query.execute.return_value.data = [{"id": 5, "is_active": False}]

        row = AdminRepository(mock_db).update_row("user_profiles", "5", {"is_active": False})

        mock_db.table.assert_called_once_with("user_profiles")
        mock_db.query.update.assert_called_once_with({"is_active": False})
        mock_db.query.eq.assert_called_once_with("id", "5")
        assert row == {"id": "5", "is_active": False}

    def test_update_row_no_match(self, mock_db):
        assert AdminRepository(mock_db).update_row("user_profiles", "x", {"is_active": False}) is None

    def test_update_job_status_stamps_time(self, mock_db):
        mock_db.query.execute.return_value.data = [
            {"id": 4, "employer_id": "e1", "title": "T", "status": "approved"}
        ]

        row = AdminRepository(mock_db).update_job_status("4", JobStatus.APPROVED)

        values = mock_db.query.update.call_args.args[0]
        assert values["status"] == "approved"
        assert "updated_at" in values
        assert row["id"] == "4"
