"""AWS SES email service implementing NotificationProtocol.

boto3 is synchronous, so each send runs in a worker thread to keep the
event loop free.
"""

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rend_auth.core.enums import ErrorCode
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage, NotificationError
from rend_auth.domain.protocols.logger_protocol import LoggerProtocol
from rend_auth.domain.protocols.notification_protocol import Notification


class SESEmailService:
    """Deliver plain-text email through AWS SES.

    Example:
        >>> service = SESEmailService(sender="no-reply@rend.app", logger=logger)
        >>> result = await service.send(Notification(
        ...     recipient="user@example.com",
        ...     subject="Password reset token",
        ...     body="...",
        ... ))
    """

    def __init__(
        self,
        sender: str,
        logger: LoggerProtocol,
        region: str = "us-east-1",
        client: Any | None = None,
    ) -> None:
        """Initialize SES email service.

        Args:
            sender: Verified SES sender address.
            logger: Structured logger.
            region: AWS region (default: us-east-1).
            client: Pre-built SES client (defaults to a boto3 client).
        """
        self._sender = sender
        self._logger = logger
        self._client = client or boto3.client("ses", region_name=region)

    async def send(self, notification: Notification) -> Result[None, NotificationError]:
        try:
            response = await asyncio.to_thread(
                self._client.send_email,
                Source=self._sender,
                Destination={"ToAddresses": [notification.recipient]},
                Message={
                    "Subject": {"Data": notification.subject, "Charset": "UTF-8"},
                    "Body": {"Text": {"Data": notification.body, "Charset": "UTF-8"}},
                },
            )
        except (BotoCoreError, ClientError) as e:
            self._logger.error(
                "Email delivery failed",
                error=e,
                recipient=notification.recipient,
            )
            return Failure(
                error=NotificationError(
                    code=ErrorCode.NOTIFICATION_FAILED,
                    message=AuthErrorMessage.EMAIL_NOT_SENT,
                    service_name="ses",
                )
            )

        self._logger.info(
            "Email sent",
            recipient=notification.recipient,
            message_id=response.get("MessageId"),
        )
        return Success(value=None)
