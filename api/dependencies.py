"""
Dependency injection setup for FastAPI.

Every authenticated request gets its own chain:

    bearer token -> user-scoped Supabase client -> SupabaseBackend
        -> SessionContext (started, closed when the request ends)
        -> feature services

The client carries the caller's token, so row-level security applies to
every query. Feature services receive the SessionContext explicitly and
read role and profile from it.
"""

from typing import AsyncIterator

from fastapi import Depends
from supabase import Client

from shared.backend import SupabaseBackend
from shared.database import create_anon_client, get_supabase_user_client
from modules.auth.session import SessionContext
from modules.admin.repository import AdminRepository
from modules.admin.service import AdminService
from modules.applications.interfaces import IApplicationService
from modules.applications.repository import ApplicationRepository
from modules.applications.service import ApplicationService
from modules.jobs.interfaces import IJobService
from modules.jobs.repository import JobRepository, SavedJobRepository
from modules.jobs.service import JobService
from modules.messages.interfaces import IMessageService
from modules.messages.repository import MessageRepository
from modules.messages.service import MessageService
from modules.profiles.repository import ProfileRepository
from modules.profiles.service import ProfileService

from .middleware.auth import get_access_token


def get_request_client(access_token: str = Depends(get_access_token)) -> Client:
    """FastAPI dependency for a Supabase client acting as the caller."""
    return get_supabase_user_client(access_token)


def get_request_backend(client: Client = Depends(get_request_client)) -> SupabaseBackend:
    """FastAPI dependency for the caller's backend store."""
    return SupabaseBackend(client)


def get_anonymous_backend() -> SupabaseBackend:
    """FastAPI dependency for a fresh, signed-out backend store (sign-in, sign-up)."""
    return SupabaseBackend(create_anon_client())


async def get_session(
    backend: SupabaseBackend = Depends(get_request_backend),
) -> AsyncIterator[SessionContext]:
    """FastAPI dependency for the caller's started session context."""
    session = SessionContext(backend)
    await session.start()
    try:
        yield session
    finally:
        session.close()


# Feature services


def get_job_service(
    client: Client = Depends(get_request_client),
    session: SessionContext = Depends(get_session),
) -> IJobService:
    """FastAPI dependency for the job service."""
    return JobService(JobRepository(client), SavedJobRepository(client), session)


def get_application_service(
    client: Client = Depends(get_request_client),
    session: SessionContext = Depends(get_session),
) -> IApplicationService:
    """FastAPI dependency for the application service."""
    return ApplicationService(ApplicationRepository(client), JobRepository(client), session)


def get_message_service(
    client: Client = Depends(get_request_client),
    session: SessionContext = Depends(get_session),
) -> IMessageService:
    """FastAPI dependency for the message service."""
    return MessageService(MessageRepository(client), session)


def get_profile_service(
    client: Client = Depends(get_request_client),
    session: SessionContext = Depends(get_session),
) -> ProfileService:
    """FastAPI dependency for the profile service."""
    return ProfileService(ProfileRepository(client), session)


def get_admin_service(
    client: Client = Depends(get_request_client),
    session: SessionContext = Depends(get_session),
) -> AdminService:
    """FastAPI dependency for the admin service."""
    return AdminService(AdminRepository(client), session)
