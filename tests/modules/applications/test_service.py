"""Tests for the applications service."""

import logging

import pytest
from unittest.mock import MagicMock

from modules.applications.exceptions import (
    AlreadyAppliedError,
    ApplicationAccessDeniedError,
    ApplicationNotFoundError,
)
from modules.applications.models import Application, ApplicationStatus
from modules.applications.repository import ApplicationRepository
from modules.applications.service import ApplicationService
from modules.auth.exceptions import InsufficientPermissionsError
from modules.jobs.exceptions import JobNotFoundError
from modules.jobs.models import Job, JobStatus
from modules.jobs.repository import JobRepository
from shared.exceptions import QueryError

USER_ID = "11111111-1111-1111-1111-111111111111"
EMPLOYER_ID = "22222222-2222-2222-2222-222222222222"


def make_job(**overrides) -> Job:
    data = {"id": "job-1", "employer_id": EMPLOYER_ID, "title": "Engineer", "status": "approved"}
    data.update(overrides)
    return Job(**data)


def make_application(**overrides) -> Application:
    data = {"id": "app-1", "job_id": "job-1", "user_id": USER_ID}
    data.update(overrides)
    return Application(**data)


@pytest.fixture
def applications_repo() -> MagicMock:
    return MagicMock(spec=ApplicationRepository)


@pytest.fixture
def jobs_repo() -> MagicMock:
    repo = MagicMock(spec=JobRepository)
    repo.get_by_id.return_value = make_job()
    return repo


class TestApply:
    @pytest.mark.asyncio
    async def test_attaches_profile_resume(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.create.return_value = make_application()
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        await service.apply("job-1", "Dear Acme")

        applications_repo.create.assert_called_once_with({
            "job_id": "job-1",
            "user_id": USER_ID,
            "cover_letter": "Dear Acme",
            "resume_url": "https://files.example.com/sam.pdf",
        })

    @pytest.mark.asyncio
    async def test_twice_is_already_applied(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.create.side_effect = QueryError(
            "duplicate key value", table="applications", code="23505"
        )
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        with pytest.raises(AlreadyAppliedError):
            await service.apply("job-1")

    @pytest.mark.asyncio
    async def test_other_failures_propagate(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.create.side_effect = QueryError("timeout", table="applications")
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        with pytest.raises(QueryError) as exc_info:
            await service.apply("job-1")
        assert not isinstance(exc_info.value, AlreadyAppliedError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "job",
        [None, make_job(status=JobStatus.PENDING), make_job(is_active=False)],
    )
    async def test_only_open_jobs(self, sign_in_as, applications_repo, jobs_repo, job):
        jobs_repo.get_by_id.return_value = job
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        with pytest.raises(JobNotFoundError):
            await service.apply("job-1")
        applications_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_employers_cannot_apply(self, sign_in_as, applications_repo, jobs_repo):
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("employer"))

        with pytest.raises(InsufficientPermissionsError):
            await service.apply("job-1")


class TestListing:
    @pytest.mark.asyncio
    async def test_my_applications(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.list_for_user.return_value = [make_application()]
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        assert len(await service.list_my_applications()) == 1
        applications_repo.list_for_user.assert_called_once_with(USER_ID)

    @pytest.mark.asyncio
    async def test_applicants_scoped_to_employer(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.list_for_employer.return_value = []
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("employer"))

        await service.list_applicants("job-1")

        applications_repo.list_for_employer.assert_called_once_with(EMPLOYER_ID, "job-1")

    @pytest.mark.asyncio
    async def test_job_seekers_cannot_see_applicants(
        self, sign_in_as, applications_repo, jobs_repo
    ):
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("user"))

        with pytest.raises(InsufficientPermissionsError):
            await service.list_applicants()


class TestUpdateStatus:
    @pytest.mark.asyncio
    async def test_owner_moves_application(
        self, sign_in_as, applications_repo, jobs_repo, caplog
    ):
        applications_repo.get_by_id.return_value = make_application(job=make_job())
        applications_repo.update_status.return_value = make_application(
            status=ApplicationStatus.INTERVIEW
        )
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("employer"))

        with caplog.at_level(logging.INFO, logger="modules.applications.service"):
            updated = await service.update_status("app-1", ApplicationStatus.INTERVIEW)

        applications_repo.update_status.assert_called_once_with("app-1", "interview")
        assert updated.status is ApplicationStatus.INTERVIEW
        assert "moved to interview" in caplog.text

    @pytest.mark.asyncio
    async def test_not_owner(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.get_by_id.return_value = make_application(
            job=make_job(employer_id="another-employer")
        )
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("employer"))

        with pytest.raises(ApplicationAccessDeniedError):
            await service.update_status("app-1", ApplicationStatus.REJECTED)
        applications_repo.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing(self, sign_in_as, applications_repo, jobs_repo):
        applications_repo.get_by_id.return_value = None
        service = ApplicationService(applications_repo, jobs_repo, await sign_in_as("employer"))

        with pytest.raises(ApplicationNotFoundError):
            await service.update_status("app-1", ApplicationStatus.REJECTED)
