"""Base domain error class for railway-oriented programming.

DomainError is the base class for every error that flows out of a handler.
Errors are data carried inside ``Failure``; they are never raised.

Usage:
    from rend_auth.core.errors import DomainError
    from rend_auth.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from rend_auth.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to the caller.
        details: Optional context for debugging (never secrets).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
