"""Tests for modules/auth/models.py."""

import pytest
from pydantic import ValidationError

from modules.auth.models import (
    PROFILE_TABLES,
    ROLE_PRIORITY,
    AdminProfile,
    EmployerProfile,
    Profile,
    Role,
    SessionSnapshot,
    SessionState,
    UserProfile,
)


class TestRole:
    def test_values(self):
        assert Role.USER.value == "user"
        assert Role.EMPLOYER.value == "employer"
        assert Role.ADMIN.value == "admin"

    def test_priority_order(self):
        assert ROLE_PRIORITY == (Role.ADMIN, Role.EMPLOYER, Role.USER)

    def test_every_role_has_a_table(self):
        assert set(PROFILE_TABLES) == set(Role)


class TestProfileModels:
    def test_user_profile_defaults(self):
        profile = UserProfile(id="u1")
        assert profile.skills == []
        assert profile.experience_years == 0
        assert profile.is_active is True

    def test_employer_profile_pending_by_default(self):
        assert EmployerProfile(id="e1").is_approved is False

    def test_extra_columns_ignored(self):
        assert not hasattr(AdminProfile(id="a1", role="whatever"), "role")


class TestProfile:
    def test_tagged_variant(self):
        profile = Profile(role=Role.EMPLOYER, data=EmployerProfile(id="e1", company_name="Acme"))
        assert profile.id == "e1"
        assert profile.display_name == "Acme"

    def test_display_name_for_user(self):
        profile = Profile(role=Role.USER, data=UserProfile(id="u1", full_name="Sam"))
        assert profile.display_name == "Sam"

    def test_rejects_mismatched_data(self):
        with pytest.raises(ValidationError):
            Profile(role=Role.EMPLOYER, data=UserProfile(id="u1"))

    def test_employer_without_optional_fields_keeps_role(self):
        # No company_name, industry or website: still an employer
        profile = Profile(role=Role.EMPLOYER, data=EmployerProfile(id="e1"))
        assert profile.role is Role.EMPLOYER

    def test_is_immutable(self):
        profile = Profile(role=Role.ADMIN, data=AdminProfile(id="a1"))
        with pytest.raises(ValidationError):
            profile.role = Role.USER


class TestSessionSnapshot:
    def test_anonymous(self):
        snapshot = SessionSnapshot(state=SessionState.ANONYMOUS)
        assert snapshot.identity is None
        assert snapshot.role is None
        assert snapshot.loading is False
        assert snapshot.error is None

    def test_serializes_role_and_profile(self):
        snapshot = SessionSnapshot(
            state=SessionState.AUTHENTICATED,
            role=Role.USER,
            profile=Profile(role=Role.USER, data=UserProfile(id="u1")),
        )
        data = snapshot.model_dump(mode="json")
        assert data["role"] == "user"
        assert data["profile"]["role"] == "user"
        assert data["profile"]["data"]["id"] == "u1"
