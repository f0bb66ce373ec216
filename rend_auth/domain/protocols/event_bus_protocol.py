"""Event bus protocol (port) for domain events.

Usage:
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(UserRegistered(user_id=user.id, email=email, role="creator"))
    >>>
    >>> async def handle(event: DomainEvent) -> None:
    ...     ...
    >>> event_bus.subscribe(UserRegistered, handle)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from rend_auth.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. Fail-open: one handler failure must NOT prevent other handlers
           from executing, and publish never raises to the publisher.
        2. Handlers execute concurrently; no ordering guarantees.
        3. Routing is by exact event type (no inheritance matching).
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register an async handler for one event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to every handler registered for its type."""
        ...
