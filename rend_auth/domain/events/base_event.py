"""Base domain event class.

Domain events are immutable records of things that happened, named in past
tense (UserRegistered, WalletAuthenticationFailed). Handlers publish them to
the event bus after the outcome is known.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class UserRegistered(DomainEvent):
    ...     user_id: UUID
    ...     email: str
    >>>
    >>> event = UserRegistered(user_id=user.id, email=user.email)
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance (auto-generated).
        occurred_at: When the event occurred, in UTC (auto-generated).

    Notes:
        - Events never carry secrets (raw tokens, passwords, signatures).
        - Failure events carry a machine-readable ``reason``.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
