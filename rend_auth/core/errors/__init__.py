"""Core errors package.

Usage:
    from rend_auth.core.errors import DomainError, ValidationError, ConflictError
"""

from rend_auth.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from rend_auth.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
]
