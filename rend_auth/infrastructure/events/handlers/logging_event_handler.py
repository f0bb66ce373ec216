"""Logging event handler for domain events.

Writes every authentication event to the structured logger.

Log Levels:
    - INFO: success events (UserRegistered, WalletNonceIssued, ...)
    - WARNING: *Failed events

Structured Fields:
    - event_id, occurred_at: correlation and ordering
    - every field declared on the event (ids rendered as strings)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> for event_type in ALL_AUTH_EVENTS:
    ...     event_bus.subscribe(event_type, handler.handle)
"""

import re
from dataclasses import fields
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from rend_auth.domain.events.base_event import DomainEvent
from rend_auth.domain.protocols.logger_protocol import LoggerProtocol

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def event_log_name(event_type: type[DomainEvent]) -> str:
    """Snake-case log name for an event class (UserLoginFailed -> user_login_failed)."""
    return _CAMEL_BOUNDARY.sub("_", event_type.__name__).lower()


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        context = {
            f.name: _render(getattr(event, f.name))
            for f in fields(event)
        }
        name = event_log_name(type(event))

        if name.endswith("_failed"):
            self._logger.warning(name, **context)
        else:
            self._logger.info(name, **context)


def _render(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value
