"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Every
authentication event is subscribed to the logging handler at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rend_auth.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with LoggingEventHandler subscribed to every
        event in ALL_AUTH_EVENTS.
    """
    from rend_auth.core.container.infrastructure import get_logger
    from rend_auth.domain.events import ALL_AUTH_EVENTS
    from rend_auth.infrastructure.events import InMemoryEventBus
    from rend_auth.infrastructure.events.handlers import LoggingEventHandler

    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())

    for event_type in ALL_AUTH_EVENTS:
        event_bus.subscribe(event_type, logging_handler.handle)

    return event_bus
