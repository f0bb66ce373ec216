"""Stub email service for development and testing.

Logs each message instead of delivering it, and keeps the messages it has
"sent" so callers (and tests) can inspect them.
"""

from rend_auth.core.result import Result, Success
from rend_auth.domain.errors import NotificationError
from rend_auth.domain.protocols.logger_protocol import LoggerProtocol
from rend_auth.domain.protocols.notification_protocol import Notification


class StubEmailService:
    """Notification sink that never talks to a mail server.

    Attributes:
        sent: Messages accepted so far, oldest first.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> Result[None, NotificationError]:
        self.sent.append(notification)
        # Body contains a live reset link; only logged outside production
        self._logger.info(
            "email_simulated",
            recipient=notification.recipient,
            subject=notification.subject,
            body=notification.body,
        )
        return Success(value=None)
