"""Authentication queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Resolve the user behind a bearer session token.

    Attributes:
        authorization_header: Raw ``Authorization`` header value
            ("Bearer <token>"), or None when absent.
    """

    authorization_header: str | None
