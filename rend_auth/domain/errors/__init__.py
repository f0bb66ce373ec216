"""Domain errors package.

Usage:
    from rend_auth.domain.errors import AuthErrorMessage, DuplicateKeyError
"""

from rend_auth.domain.errors.auth_error_message import AuthErrorMessage
from rend_auth.domain.errors.duplicate_key_error import DuplicateKeyError
from rend_auth.domain.errors.notification_error import NotificationError

__all__ = ["AuthErrorMessage", "DuplicateKeyError", "NotificationError"]
