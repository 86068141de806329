"""
Tests for authentication endpoints and the per-request session chain.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi import Depends
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_anonymous_backend, get_request_backend, get_session
from api.middleware.auth import get_access_token
from shared.exceptions import QueryError
from shared.models import Identity

TEST_JWT_SECRET = "test-secret-key-for-testing-only"
USER_ID = "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def app(backend):
    app = create_app()
    app.dependency_overrides[get_anonymous_backend] = lambda: backend
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestSignIn:
    def test_returns_tokens_and_resolved_session(self, client):
        response = client.post(
            "/api/auth/sign-in",
            json={"email": "seeker@example.com", "password": "pw-user"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"].startswith("access-")
        assert data["refresh_token"].startswith("refresh-")
        assert data["session"]["state"] == "authenticated"
        assert data["session"]["role"] == "user"
        assert data["session"]["loading"] is False
        assert data["session"]["profile"]["data"]["full_name"] == "Sam Seeker"

    def test_employer_profile_round_trips(self, client):
        response = client.post(
            "/api/auth/sign-in",
            json={"email": "jobs@acme.example.com", "password": "pw-employer"},
        )

        profile = response.json()["session"]["profile"]
        assert profile["role"] == "employer"
        assert profile["data"]["company_name"] == "Acme Corp"
        assert profile["data"]["is_approved"] is True

    def test_bad_credentials(self, client):
        response = client.post(
            "/api/auth/sign-in",
            json={"email": "seeker@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {
            "error": "AUTH_ERROR",
            "message": "Invalid login credentials",
            "details": {},
        }

    def test_unprovisioned_account(self, client, backend):
        backend.auth.add_account("ghost@example.com", "pw", identity_id="ghost")

        response = client.post(
            "/api/auth/sign-in",
            json={"email": "ghost@example.com", "password": "pw"},
        )

        session = response.json()["session"]
        assert response.status_code == 200
        assert session["identity"]["id"] == "ghost"
        assert session["role"] is None
        assert session["profile"] is None

    def test_role_lookup_failure_is_reported(self, client, backend):
        backend.table("admin_profiles").select_one = AsyncMock(
            side_effect=QueryError("connection refused", table="admin_profiles")
        )

        response = client.post(
            "/api/auth/sign-in",
            json={"email": "seeker@example.com", "password": "pw-user"},
        )

        session = response.json()["session"]
        assert session["role"] is None
        assert session["loading"] is False
        assert session["error"] == "connection refused"

    def test_invalid_email(self, client):
        response = client.post("/api/auth/sign-in", json={"email": "nope", "password": "x"})

        assert response.status_code == 422


class TestSignUp:
    def test_job_seeker(self, client, backend):
        response = client.post(
            "/api/auth/sign-up",
            json={
                "email": "new@example.com",
                "password": "secret1",
                "role": "user",
                "full_name": "Nia New",
                "location": "Oslo",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["session"]["role"] == "user"
        assert data["session"]["profile"]["data"]["full_name"] == "Nia New"
        row = backend.table("user_profiles").rows[-1]
        assert row["id"] == data["identity"]["id"]
        assert row["email"] == "new@example.com"

    def test_employer_requires_company_name(self, client):
        response = client.post(
            "/api/auth/sign-up",
            json={"email": "hr@globex.example.com", "password": "secret1", "role": "employer"},
        )

        assert response.status_code == 422

    def test_admin_sign_up_not_allowed(self, client):
        response = client.post(
            "/api/auth/sign-up",
            json={
                "email": "boss@example.com",
                "password": "secret1",
                "role": "admin",
                "full_name": "Boss",
            },
        )

        assert response.status_code == 422

    def test_short_password(self, client):
        response = client.post(
            "/api/auth/sign-up",
            json={"email": "a@example.com", "password": "123", "role": "user", "full_name": "A"},
        )

        assert response.status_code == 422

    def test_duplicate_email(self, client):
        response = client.post(
            "/api/auth/sign-up",
            json={
                "email": "seeker@example.com",
                "password": "secret1",
                "role": "user",
                "full_name": "Sam Again",
            },
        )

        assert response.status_code == 401
        assert response.json()["message"] == "User already registered"

    def test_lookup_failure_after_insert_still_creates_account(self, client, backend):
        backend.table("admin_profiles").select_one = AsyncMock(
            side_effect=QueryError("connection refused", table="admin_profiles")
        )

        response = client.post(
            "/api/auth/sign-up",
            json={
                "email": "new@example.com",
                "password": "secret1",
                "role": "user",
                "full_name": "Nia New",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["session"]["role"] is None
        assert data["session"]["error"] == "connection refused"
        assert backend.table("user_profiles").rows[-1]["id"] == data["identity"]["id"]

    def test_profile_insert_failure(self, client, backend):
        backend.table("employer_profiles").insert = AsyncMock(
            side_effect=QueryError("violates row-level security policy", table="employer_profiles")
        )

        response = client.post(
            "/api/auth/sign-up",
            json={
                "email": "hr@globex.example.com",
                "password": "secret1",
                "role": "employer",
                "company_name": "Globex",
            },
        )

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "PROFILE_INSERT_FAILED"
        assert data["details"]["table"] == "employer_profiles"
        assert "identity_id" in data["details"]


class TestSessionEndpoints:
    @pytest.fixture
    def signed_in(self, app, backend):
        """Route the request-scoped backend to the in-memory store, behind the token check."""

        def request_backend(token: str = Depends(get_access_token)):
            backend.auth.set_session(Identity(id=USER_ID, email="seeker@example.com"))
            return backend

        app.dependency_overrides[get_request_backend] = request_backend
        return app

    @pytest.fixture(autouse=True)
    def jwt_secret(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_JWT_SECRET", TEST_JWT_SECRET)

    def test_missing_token(self, signed_in, client):
        response = client.get("/api/auth/session")

        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_TOKEN"

    def test_expired_token(self, signed_in, client, create_test_token):
        response = client.get(
            "/api/auth/session",
            headers={"Authorization": f"Bearer {create_test_token(expired=True)}"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"

    def test_current_session(self, signed_in, client, auth_headers):
        response = client.get("/api/auth/session", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["identity"]["id"] == USER_ID
        assert data["role"] == "user"
        assert data["state"] == "authenticated"

    def test_refresh(self, signed_in, client, auth_headers, backend):
        backend.table("user_profiles").rows[0]["location"] = "Lisbon"

        response = client.post("/api/auth/session/refresh", headers=auth_headers)

        assert response.json()["profile"]["data"]["location"] == "Lisbon"

    def test_refresh_failure_is_raised(self, signed_in, client, auth_headers, backend):
        backend.table("user_profiles").select_one = AsyncMock(
            side_effect=QueryError("statement timeout", table="user_profiles")
        )

        response = client.post("/api/auth/session/refresh", headers=auth_headers)

        assert response.status_code == 502
        assert response.json()["details"]["service"] == "supabase"

    def test_sign_out(self, signed_in, client, auth_headers, backend):
        response = client.post("/api/auth/sign-out", headers=auth_headers)

        assert response.status_code == 204
        assert backend.auth._session is None

    def test_dashboard_uses_same_chain(self, signed_in, client, auth_headers):
        response = client.get("/api/dashboard", headers=auth_headers)

        assert response.json()["view"] == "user"

    def test_session_is_closed_after_request(self, app, client, backend):
        opened = []

        async def tracking_session():
            sessions = get_session(backend)
            session = await sessions.__anext__()
            opened.append(session)
            try:
                yield session
            finally:
                await sessions.aclose()

        app.dependency_overrides[get_session] = tracking_session

        client.get("/api/auth/session")

        assert opened[0].state.value == "anonymous"
        assert backend.auth._callbacks == []
