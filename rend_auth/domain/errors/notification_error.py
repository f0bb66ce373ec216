"""Notification delivery error."""

from dataclasses import dataclass

from rend_auth.core.errors import ExternalServiceError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationError(ExternalServiceError):
    """The notification sink could not deliver a message.

    Carried inside ``Failure``; notification adapters never raise for
    delivery failures.
    """

    pass
