"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Awaitable, Callable, Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

from modules.auth.session import SessionContext
from modules.auth.tokens import reset_token_validator
from shared.backend import InMemoryBackend
from shared.config import get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

USER_ID = "11111111-1111-1111-1111-111111111111"
EMPLOYER_ID = "22222222-2222-2222-2222-222222222222"
ADMIN_ID = "33333333-3333-3333-3333-333333333333"


def _create_test_token(
    user_id: str = USER_ID,
    email: str = "seeker@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token shaped like a Supabase access token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        audience: ``aud`` claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the token validator around each test."""
    get_settings.cache_clear()
    reset_token_validator()
    yield
    get_settings.cache_clear()
    reset_token_validator()


@pytest.fixture
def create_test_token() -> Callable[..., str]:
    """Factory for signed test tokens."""
    return _create_test_token


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers with a valid token for the job seeker."""
    return {"Authorization": f"Bearer {_create_test_token()}"}


@pytest.fixture
def user_row() -> dict:
    return {
        "id": USER_ID,
        "full_name": "Sam Seeker",
        "email": "seeker@example.com",
        "location": "Berlin",
        "skills": ["python", "sql"],
        "experience_years": 4,
        "resume_url": "https://files.example.com/sam.pdf",
        "is_active": True,
    }


@pytest.fixture
def employer_row() -> dict:
    return {
        "id": EMPLOYER_ID,
        "company_name": "Acme Corp",
        "email": "jobs@acme.example.com",
        "industry": "Manufacturing",
        "is_approved": True,
        "is_active": True,
    }


@pytest.fixture
def admin_row() -> dict:
    return {
        "id": ADMIN_ID,
        "full_name": "Ada Admin",
        "email": "admin@example.com",
        "is_active": True,
    }


@pytest.fixture
def backend(user_row, employer_row, admin_row) -> InMemoryBackend:
    """
    In-memory backend with one account per role, nobody signed in.

    Passwords are ``pw-<role>``.
    """
    store = InMemoryBackend()
    store.auth.add_account("seeker@example.com", "pw-user", identity_id=USER_ID)
    store.auth.add_account("jobs@acme.example.com", "pw-employer", identity_id=EMPLOYER_ID)
    store.auth.add_account("admin@example.com", "pw-admin", identity_id=ADMIN_ID)
    store.seed("user_profiles", user_row)
    store.seed("employer_profiles", employer_row)
    store.seed("admin_profiles", admin_row)
    return store


CREDENTIALS = {
    "user": ("seeker@example.com", "pw-user"),
    "employer": ("jobs@acme.example.com", "pw-employer"),
    "admin": ("admin@example.com", "pw-admin"),
}


@pytest.fixture
def sign_in_as(backend) -> Callable[[str], Awaitable[SessionContext]]:
    """
    Factory for a started, settled session signed in as ``user``,
    ``employer`` or ``admin`` against the ``backend`` fixture.
    """

    async def _sign_in(role: str) -> SessionContext:
        email, password = CREDENTIALS[role]
        session = SessionContext(backend)
        await session.start()
        await session.sign_in(email, password)
        await session.wait_until_settled()
        return session

    return _sign_in


@pytest.fixture
def anonymous_session(backend) -> Callable[[], Awaitable[SessionContext]]:
    """Factory for a started session with nobody signed in."""

    async def _start() -> SessionContext:
        session = SessionContext(backend)
        await session.start()
        return session

    return _start


QUERY_BUILDER_METHODS = (
    "select", "insert", "update", "delete", "eq", "neq", "or_", "ilike",
    "in_", "order", "limit",
)


def _mock_query(data: Optional[list] = None, count: Optional[int] = None) -> MagicMock:
    """A PostgREST query builder mock: every filter returns the builder itself."""
    query = MagicMock()
    for method in QUERY_BUILDER_METHODS:
        getattr(query, method).return_value = query
    query.execute.return_value.data = data if data is not None else []
    query.execute.return_value.count = count
    return query


@pytest.fixture
def mock_query() -> Callable[..., MagicMock]:
    return _mock_query


@pytest.fixture
def mock_db() -> MagicMock:
    """
    Supabase client mock.

    ``mock_db.query`` is the builder every ``table()`` call returns; set
    ``mock_db.query.execute.return_value.data`` to shape results.
    """
    db = MagicMock()
    db.query = _mock_query()
    db.table.return_value = db.query
    return db
