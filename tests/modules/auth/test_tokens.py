"""Tests for modules/auth/tokens.py."""

import pytest

from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from modules.auth.tokens import TokenValidator, get_token_validator, reset_token_validator

TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def validator() -> TokenValidator:
    return TokenValidator(secret=TEST_JWT_SECRET)


class TestValidateToken:
    @pytest.mark.asyncio
    async def test_valid_token(self, validator, create_test_token):
        identity = await validator.validate_token(create_test_token(user_id="u-1", email="a@b.c"))

        assert identity.id == "u-1"
        assert identity.email == "a@b.c"

    @pytest.mark.asyncio
    async def test_missing_token(self, validator):
        with pytest.raises(MissingTokenError):
            await validator.validate_token(None)
        with pytest.raises(MissingTokenError):
            await validator.validate_token("")

    @pytest.mark.asyncio
    async def test_expired_token(self, validator, create_test_token):
        with pytest.raises(ExpiredTokenError):
            await validator.validate_token(create_test_token(expired=True))

    @pytest.mark.asyncio
    async def test_wrong_signature(self, validator, create_test_token):
        with pytest.raises(InvalidTokenError, match="Invalid token"):
            await validator.validate_token(create_test_token(secret="another-secret-entirely"))

    @pytest.mark.asyncio
    async def test_wrong_audience(self, validator, create_test_token):
        with pytest.raises(InvalidTokenError):
            await validator.validate_token(create_test_token(audience="anon"))

    @pytest.mark.asyncio
    async def test_garbage(self, validator):
        with pytest.raises(InvalidTokenError):
            await validator.validate_token("not.a.jwt")

    @pytest.mark.asyncio
    async def test_unconfigured_secret(self, create_test_token):
        with pytest.raises(InvalidTokenError) as exc_info:
            await TokenValidator(secret="").validate_token(create_test_token())

        assert exc_info.value.message == "Server authentication not configured"


class TestSingleton:
    def test_reads_secret_from_settings(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_JWT_SECRET", "from-env")

        assert get_token_validator()._secret == "from-env"

    def test_reset(self):
        first = get_token_validator()
        assert get_token_validator() is first

        reset_token_validator()

        assert get_token_validator() is not first
