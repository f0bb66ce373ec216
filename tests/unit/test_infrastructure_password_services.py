"""Unit tests for bcrypt password hashing and reset token generation."""

import hashlib
from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from rend_auth.infrastructure.security import (
    BcryptPasswordService,
    PasswordResetTokenService,
)


@pytest.mark.unit
class TestBcryptPasswordService:
    def test_hash_and_verify(self, password_service):
        password_hash = password_service.hash_password("secret123")

        assert password_hash != "secret123"
        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password("secret123", password_hash)
        assert not password_service.verify_password("wrong-pass", password_hash)

    def test_hashes_are_salted(self, password_service):
        assert password_service.hash_password("same") != password_service.hash_password(
            "same"
        )

    def test_invalid_hash_returns_false(self, password_service):
        assert not password_service.verify_password("secret123", "not-a-bcrypt-hash")

    def test_dummy_hash_is_computed_once(self, password_service):
        first = password_service.dummy_hash
        assert password_service.dummy_hash is first
        assert not password_service.verify_password("secret123", first)

    @pytest.mark.parametrize("cost", [3, 21])
    def test_cost_out_of_range(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)


@pytest.mark.unit
class TestPasswordResetTokenService:
    def test_token_is_40_hex_characters(self, reset_token_service):
        token = reset_token_service.generate_token()

        assert len(token) == 40
        int(token, 16)

    def test_tokens_are_unique(self, reset_token_service):
        assert reset_token_service.generate_token() != reset_token_service.generate_token()

    def test_hash_is_sha256_hex(self, reset_token_service):
        token = "abc123"
        assert reset_token_service.hash_token(token) == hashlib.sha256(
            b"abc123"
        ).hexdigest()

    def test_expiration_is_one_hour(self):
        service = PasswordResetTokenService(expiration_minutes=60)
        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

        with freeze_time(now):
            assert service.calculate_expiration() == now + timedelta(hours=1)
