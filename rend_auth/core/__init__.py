"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes carried inside Failure results
- Configuration and constants

The core module has NO dependencies on other application layers.
"""

from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DomainError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from rend_auth.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "ExternalServiceError",
    "Failure",
    "InternalError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
