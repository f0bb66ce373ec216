"""Unit tests for AuthenticateFederatedHandler.

Tests cover:
- ID token and authorization code paths
- Unconfigured provider (configuration error, not an auth error)
- Every verification failure collapses to INVALID_ASSERTION
- FederatedIdentityLinked emitted only when an existing user was linked
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from rend_auth.application.commands import (
    AuthenticateFederated,
    AuthenticateFederatedCode,
)
from rend_auth.application.commands.handlers.authenticate_federated_handler import (
    AuthenticateFederatedHandler,
    FederatedAuthenticationReason,
)
from rend_auth.application.services import ResolvedIdentity
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    InternalError,
)
from rend_auth.core.result import Failure, Success
from rend_auth.domain.entities import User
from rend_auth.domain.enums import UserRole
from rend_auth.domain.events import (
    FederatedAuthenticationFailed,
    FederatedAuthenticationSucceeded,
    FederatedIdentityLinked,
)
from rend_auth.domain.protocols import FederatedClaims

CLAIMS = FederatedClaims(
    subject_id="109876543210123456",
    email="ada@example.com",
    display_name="Ada Lovelace",
    email_verified=True,
)


def federated_user() -> User:
    now = datetime.now(UTC)
    return User(
        id=uuid7(),
        role=UserRole.CREATOR,
        created_at=now,
        updated_at=now,
        email="ada@example.com",
        federated_id=CLAIMS.subject_id,
        federated_authenticated=True,
    )


@pytest.fixture
def identity_provider():
    provider = Mock()
    provider.is_configured.return_value = True
    provider.verify = AsyncMock(return_value=Success(value=CLAIMS))
    provider.exchange_code = AsyncMock(return_value=Success(value=CLAIMS))
    return provider


@pytest.fixture
def identity_resolver():
    resolver = AsyncMock()
    resolver.resolve_federated_user.return_value = Success(
        value=ResolvedIdentity(user=federated_user(), created=True)
    )
    return resolver


@pytest.fixture
def event_bus():
    return AsyncMock()


@pytest.fixture
def handler(identity_provider, identity_resolver, event_bus, logger):
    session_service = Mock()
    session_service.issue.return_value = "session.jwt.token"
    return AuthenticateFederatedHandler(
        identity_provider=identity_provider,
        identity_resolver=identity_resolver,
        session_service=session_service,
        event_bus=event_bus,
        logger=logger,
    )


def published(event_bus) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.mark.unit
class TestAuthenticateFederatedHandlerSuccess:
    async def test_id_token_returns_session(
        self, handler, identity_provider, identity_resolver, event_bus
    ):
        result = await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        assert isinstance(result, Success)
        assert result.value.token == "session.jwt.token"
        assert result.value.user.federated_id == CLAIMS.subject_id
        identity_provider.verify.assert_awaited_once_with("id-token")
        identity_resolver.resolve_federated_user.assert_awaited_once_with(CLAIMS)
        events = published(event_bus)
        assert len(events) == 1
        assert isinstance(events[0], FederatedAuthenticationSucceeded)
        assert events[0].created is True

    async def test_code_path_exchanges_code(self, handler, identity_provider):
        result = await handler.handle(AuthenticateFederatedCode(code="auth-code"))

        assert isinstance(result, Success)
        identity_provider.exchange_code.assert_awaited_once_with("auth-code")
        identity_provider.verify.assert_not_awaited()

    async def test_linked_user_emits_linked_event(
        self, handler, identity_resolver, event_bus
    ):
        user = federated_user()
        identity_resolver.resolve_federated_user.return_value = Success(
            value=ResolvedIdentity(user=user, linked=True)
        )

        await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        linked, succeeded = published(event_bus)
        assert isinstance(linked, FederatedIdentityLinked)
        assert linked.user_id == user.id
        assert linked.email == "ada@example.com"
        assert isinstance(succeeded, FederatedAuthenticationSucceeded)
        assert succeeded.created is False


@pytest.mark.unit
class TestAuthenticateFederatedHandlerFailure:
    async def test_unconfigured_provider(self, handler, identity_provider, event_bus):
        identity_provider.is_configured.return_value = False

        result = await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        assert isinstance(result.error, ConfigurationError)
        assert result.error.code == ErrorCode.PROVIDER_UNCONFIGURED
        identity_provider.verify.assert_not_awaited()
        event = event_bus.publish.call_args.args[0]
        assert event.reason == FederatedAuthenticationReason.PROVIDER_UNCONFIGURED

    @pytest.mark.parametrize(
        "reason", ["expired", "invalid_audience", "invalid_issuer", "key_unavailable"]
    )
    async def test_rejected_assertion(
        self, handler, identity_provider, identity_resolver, logger, reason
    ):
        identity_provider.verify.return_value = Failure(error=reason)

        result = await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_ASSERTION
        assert result.error.message == "Invalid or expired Google token"
        logger.warning.assert_called_once_with(
            "federated_assertion_rejected", reason=reason
        )
        identity_resolver.resolve_federated_user.assert_not_awaited()

    async def test_failed_code_exchange(self, handler, identity_provider, event_bus):
        identity_provider.exchange_code.return_value = Failure(error="exchange_rejected")

        result = await handler.handle(AuthenticateFederatedCode(code="bad-code"))

        assert result.error.code == ErrorCode.INVALID_ASSERTION
        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, FederatedAuthenticationFailed)
        assert event.reason == FederatedAuthenticationReason.INVALID_ASSERTION

    async def test_resolution_conflict(self, handler, identity_resolver):
        conflict = ConflictError(
            code=ErrorCode.DUPLICATE_IDENTITY,
            message="Identity already linked to another account",
            conflicting_field="username",
        )
        identity_resolver.resolve_federated_user.return_value = Failure(error=conflict)

        result = await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        assert result.error is conflict

    async def test_unexpected_error(self, handler, identity_resolver, logger):
        identity_resolver.resolve_federated_user.side_effect = RuntimeError("boom")

        result = await handler.handle(AuthenticateFederated(assertion_token="id-token"))

        assert isinstance(result.error, InternalError)
        logger.error.assert_called_once()
