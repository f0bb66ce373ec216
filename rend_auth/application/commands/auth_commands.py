"""Password authentication commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Commands carry raw input; handlers validate and normalize.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a password account and start a session.

    Attributes:
        username: Desired username (>= 3 chars, case-sensitive).
        email: Email address (normalized to lowercase).
        password: Plaintext password (hashed before storage).
        role: "creator" or "reviewer".

    Example:
        >>> command = RegisterUser(
        ...     username="ada",
        ...     email="ada@example.com",
        ...     password="secret123",
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    email: str
    password: str
    role: str = "creator"


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password and start a session.

    Attributes:
        email: Email address (case-insensitive).
        password: Plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset link by email.

    Always answered with the same success payload, whether or not the
    account exists.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Redeem a password reset token.

    Attributes:
        token: Raw reset token from the reset link.
        new_password: Replacement plaintext password.
    """

    token: str
    new_password: str
