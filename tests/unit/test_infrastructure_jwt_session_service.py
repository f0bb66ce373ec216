"""Unit tests for JWTSessionService.

Tests cover:
- Issue/verify round trip and claim set
- Expiry (freezegun)
- Tampered, foreign-key and malformed tokens
- Non-UUID subject
- Secret length check
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from rend_auth.core.config import SessionTokenConfig
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import AuthenticationError
from rend_auth.core.result import Failure, Success
from rend_auth.infrastructure.security import JWTSessionService
from tests.utils import TEST_SECRET_KEY


@pytest.mark.unit
class TestJWTSessionServiceIssue:
    def test_round_trip_returns_user_id(self, session_service):
        user_id = uuid7()

        result = session_service.verify(session_service.issue(user_id))

        assert isinstance(result, Success)
        assert result.value == user_id

    def test_claims(self, session_service):
        user_id = uuid7()
        token = session_service.issue(user_id)

        payload = jwt.decode(token, TEST_SECRET_KEY, algorithms=["HS256"])

        assert payload["sub"] == str(user_id)
        assert payload["exp"] - payload["iat"] == 30 * 24 * 3600
        assert UUID(payload["jti"])

    def test_each_token_has_unique_jti(self, session_service):
        user_id = uuid7()
        first = jwt.decode(
            session_service.issue(user_id), TEST_SECRET_KEY, algorithms=["HS256"]
        )
        second = jwt.decode(
            session_service.issue(user_id), TEST_SECRET_KEY, algorithms=["HS256"]
        )
        assert first["jti"] != second["jti"]

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32"):
            JWTSessionService(SessionTokenConfig(secret_key="too-short"))


@pytest.mark.unit
class TestJWTSessionServiceVerify:
    def assert_unauthorized(self, result):
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        assert result.error.message == "Not authorized to access this route"

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_missing_or_malformed(self, session_service, token):
        self.assert_unauthorized(session_service.verify(token))

    def test_expired_token(self, session_service):
        with freeze_time(datetime(2026, 1, 1, tzinfo=UTC)):
            token = session_service.issue(uuid7())

        with freeze_time(datetime(2026, 1, 1, tzinfo=UTC) + timedelta(days=31)):
            self.assert_unauthorized(session_service.verify(token))

    def test_token_still_valid_before_expiry(self, session_service):
        user_id = uuid7()
        with freeze_time(datetime(2026, 1, 1, tzinfo=UTC)):
            token = session_service.issue(user_id)

        with freeze_time(datetime(2026, 1, 1, tzinfo=UTC) + timedelta(days=29)):
            assert session_service.verify(token) == Success(value=user_id)

    def test_tampered_signature(self, session_service):
        token = session_service.issue(uuid7())
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        self.assert_unauthorized(session_service.verify(tampered))

    def test_token_signed_with_other_secret(self, session_service):
        other = JWTSessionService(SessionTokenConfig(secret_key="x" * 40))
        self.assert_unauthorized(session_service.verify(other.issue(uuid7())))

    def test_non_uuid_subject(self, session_service):
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "iat": int(now.timestamp()),
                "exp": int((now + timedelta(days=1)).timestamp()),
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )
        self.assert_unauthorized(session_service.verify(token))

    def test_missing_exp_claim(self, session_service):
        token = jwt.encode(
            {"sub": str(uuid7()), "iat": int(datetime.now(UTC).timestamp())},
            TEST_SECRET_KEY,
            algorithm="HS256",
        )
        self.assert_unauthorized(session_service.verify(token))
