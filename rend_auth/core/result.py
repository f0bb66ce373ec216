"""Result types for railway-oriented programming.

Every authentication flow can fail in several expected ways (bad signature,
reused nonce, wrong password). Those outcomes are returned as values instead
of raised, so callers must handle them explicitly.

Usage:
    result = await handler.handle(LoginUser(email=email, password=password))
    match result:
        case Success(value=session):
            return session.token
        case Failure(error=error):
            return error.message
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error describing why the operation failed.
    """

    error: E


Result = Success[T] | Failure[E]
