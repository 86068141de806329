"""
Authentication endpoints.

Sign-in and sign-up run on a fresh anonymous backend and return the
tokens the browser client stores. The session endpoints run on the
caller's request-scoped session context.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from shared.backend import SupabaseBackend
from shared.config import get_settings
from shared.exceptions import AuthProviderError, ExternalServiceError, QueryError
from shared.models import AuthSession
from modules.auth.models import Role, SessionSnapshot
from modules.auth.session import SessionContext

from ..dependencies import get_anonymous_backend, get_session
from ..models.auth import AuthResponse, SignInRequest, SignUpRequest, SignUpResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def _settle(session: SessionContext) -> None:
    timeout = get_settings().session_settle_timeout
    try:
        await session.wait_until_settled(timeout=timeout)
    except asyncio.TimeoutError:
        raise ExternalServiceError(
            "Timed out waiting for the session to resolve",
            service="supabase",
            code="SESSION_TIMEOUT",
        )


def _tokens(auth_session: Optional[AuthSession]) -> dict:
    if auth_session is None:
        return {}
    return {
        "access_token": auth_session.access_token,
        "refresh_token": auth_session.refresh_token,
        "expires_at": auth_session.expires_at,
    }


@router.post("/sign-in", response_model=AuthResponse)
async def sign_in(
    request: SignInRequest,
    backend: SupabaseBackend = Depends(get_anonymous_backend),
) -> AuthResponse:
    """
    Sign in with email and password.

    Returns once the role and profile for the new session are resolved.
    """
    async with SessionContext(backend) as session:
        try:
            await session.sign_in(request.email, request.password)
        except AuthProviderError as e:
            logger.warning("Sign-in failed for %s: %s", request.email, e.message)
            raise

        await _settle(session)
        auth_session = await backend.auth.get_current_session()
        return AuthResponse(session=session.snapshot(), **_tokens(auth_session))


@router.post("/sign-up", response_model=SignUpResponse, status_code=201)
async def sign_up(
    request: SignUpRequest,
    backend: SupabaseBackend = Depends(get_anonymous_backend),
) -> SignUpResponse:
    """
    Create an account and its job seeker or employer profile.
    """
    async with SessionContext(backend) as session:
        try:
            identity = await session.sign_up(
                request.email,
                request.password,
                Role(request.role),
                request.profile_data(),
            )
        except (AuthProviderError, QueryError) as e:
            logger.warning("Sign-up failed for %s: %s", request.email, e.message)
            raise

        await _settle(session)
        auth_session = await backend.auth.get_current_session()
        return SignUpResponse(
            identity=identity,
            session=session.snapshot(),
            **_tokens(auth_session),
        )


@router.post("/sign-out", status_code=204)
async def sign_out(session: SessionContext = Depends(get_session)) -> None:
    """Revoke the caller's session with the auth provider."""
    await session.sign_out()


@router.get("/session", response_model=SessionSnapshot)
async def get_current_session(
    session: SessionContext = Depends(get_session),
) -> SessionSnapshot:
    """
    The caller's identity, role and profile.

    A failed role lookup shows up as ``error`` with no role.
    """
    return session.snapshot()


@router.post("/session/refresh", response_model=SessionSnapshot)
async def refresh_session(
    session: SessionContext = Depends(get_session),
) -> SessionSnapshot:
    """Re-resolve role and profile, raising if the lookup fails."""
    await session.refresh_profile()
    return session.snapshot()
