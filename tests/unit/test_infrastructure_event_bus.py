"""Unit tests for InMemoryEventBus and LoggingEventHandler.

Tests cover:
- Dispatch to every subscriber of the exact event type
- Fail-open: handler exceptions are logged, never raised
- Log level selection for *Failed events
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from rend_auth.domain.events import (
    ALL_AUTH_EVENTS,
    DomainEvent,
    UserLoginFailed,
    UserRegistered,
    WalletNonceIssued,
)
from rend_auth.infrastructure.events import InMemoryEventBus
from rend_auth.infrastructure.events.handlers import LoggingEventHandler
from rend_auth.infrastructure.events.handlers.logging_event_handler import (
    event_log_name,
)


@pytest.mark.unit
class TestInMemoryEventBus:
    async def test_publish_calls_all_handlers(self, logger):
        bus = InMemoryEventBus(logger=logger)
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(UserRegistered, first)
        bus.subscribe(UserRegistered, second)
        event = UserRegistered(user_id=uuid7(), email="ada@example.com", role="creator")

        await bus.publish(event)

        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)

    async def test_publish_without_handlers_is_noop(self, logger):
        bus = InMemoryEventBus(logger=logger)

        await bus.publish(UserLoginFailed(email="ada@example.com", reason="x"))

        logger.debug.assert_not_called()

    async def test_only_exact_type_dispatched(self, logger):
        bus = InMemoryEventBus(logger=logger)
        handler = AsyncMock()
        bus.subscribe(DomainEvent, handler)

        await bus.publish(UserLoginFailed(email="ada@example.com", reason="x"))

        handler.assert_not_awaited()

    async def test_failing_handler_is_logged_and_others_run(self, logger):
        bus = InMemoryEventBus(logger=logger)
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        healthy = AsyncMock()
        bus.subscribe(UserRegistered, failing)
        bus.subscribe(UserRegistered, healthy)

        await bus.publish(
            UserRegistered(user_id=uuid7(), email="ada@example.com", role="creator")
        )

        healthy.assert_awaited_once()
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "event_handler_failed"
        assert logger.warning.call_args.kwargs["error_type"] == "RuntimeError"


@pytest.mark.unit
class TestLoggingEventHandler:
    def test_event_log_name(self):
        assert event_log_name(UserLoginFailed) == "user_login_failed"
        assert event_log_name(WalletNonceIssued) == "wallet_nonce_issued"

    async def test_success_event_logged_at_info(self, logger):
        user_id = uuid7()
        event = UserRegistered(user_id=user_id, email="ada@example.com", role="creator")

        await LoggingEventHandler(logger=logger).handle(event)

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args == ("user_registered",)
        assert kwargs["user_id"] == str(user_id)
        assert kwargs["event_id"] == str(event.event_id)
        assert isinstance(kwargs["occurred_at"], str)

    async def test_failed_event_logged_at_warning(self, logger):
        await LoggingEventHandler(logger=logger).handle(
            UserLoginFailed(email="ada@example.com", reason="invalid_password")
        )

        logger.warning.assert_called_once()
        assert logger.warning.call_args.args == ("user_login_failed",)
        assert logger.warning.call_args.kwargs["user_id"] is None
        logger.info.assert_not_called()

    def test_all_auth_events_have_unique_log_names(self):
        names = [event_log_name(event_type) for event_type in ALL_AUTH_EVENTS]

        assert len(set(names)) == len(names)
