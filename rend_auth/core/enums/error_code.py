"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming where it reads naturally.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, DUPLICATE_IDENTITY)
- Authentication errors (INVALID_CREDENTIALS, INVALID_SIGNATURE, ...)
- Authorization errors (PERMISSION_DENIED)
- Configuration and infrastructure faults
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_FORMAT = "invalid_format"
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    INVALID_USERNAME = "invalid_username"
    INVALID_WALLET_SCHEME = "invalid_wallet_scheme"
    INVALID_WALLET_ADDRESS = "invalid_wallet_address"
    MISSING_CREDENTIAL = "missing_credential"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    DUPLICATE_IDENTITY = "duplicate_identity"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_ASSERTION = "invalid_assertion"
    INVALID_OR_EXPIRED_NONCE = "invalid_or_expired_nonce"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    UNAUTHORIZED = "unauthorized"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Configuration / infrastructure
    PROVIDER_UNCONFIGURED = "provider_unconfigured"
    NOTIFICATION_FAILED = "notification_failed"
    INTERNAL_ERROR = "internal_error"
