"""Error kinds shared by every authentication flow.

Error Types:
- ValidationError: missing or malformed input
- ConflictError: a unique identity field is already taken
- AuthenticationError: a credential, signature, assertion, nonce,
  reset token or session token was rejected
- AuthorizationError: authenticated, but not allowed
- ConfigurationError: server-side misconfiguration (e.g. OAuth unset)
- ExternalServiceError: a collaborator (email sink) failed
- InternalError: unexpected store/infrastructure fault, details withheld

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Please provide a valid email",
        field="email",
    ))
"""

from dataclasses import dataclass

from rend_auth.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input field.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found."""

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Unique identity collision (DuplicateIdentity).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Unique field that collided (email, username, ...).
    """

    resource_type: str = "User"
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication rejection.

    Messages are generic on purpose; the ``code`` tells callers which
    check failed without leaking it to the end user.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (authenticated but not permitted).

    Attributes:
        required_role: Role that was required.
    """

    required_role: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(DomainError):
    """Server-side misconfiguration, surfaced as a server fault."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(DomainError):
    """A collaborator (email sink, OAuth endpoint) failed.

    Attributes:
        service_name: Name of the failing collaborator.
    """

    service_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unexpected fault. The message never includes exception text."""

    pass
