"""Notification sink protocol (outbound email)."""

from dataclasses import dataclass
from typing import Protocol

from rend_auth.core.result import Result
from rend_auth.domain.errors import NotificationError


@dataclass(frozen=True, slots=True, kw_only=True)
class Notification:
    """Outbound message.

    Attributes:
        recipient: Destination email address.
        subject: Subject line.
        body: Plain-text body.
    """

    recipient: str
    subject: str
    body: str


class NotificationProtocol(Protocol):
    """Notification sink (port).

    Implementations:
        - StubEmailService: logs messages (development/testing)
        - SESEmailService: AWS SES via boto3

    Delivery failures are returned as ``Failure(NotificationError)``; an
    adapter never raises for them.
    """

    async def send(self, notification: Notification) -> Result[None, NotificationError]:
        ...
