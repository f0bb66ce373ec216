"""Session token protocol (issue and verify bearer tokens)."""

from typing import Protocol
from uuid import UUID

from rend_auth.core.errors import AuthenticationError
from rend_auth.core.result import Result


class SessionTokenProtocol(Protocol):
    """Session issuer (port).

    Tokens are stateless signed assertions of {user id, issue time, expiry}.

    Implementations:
        - JWTSessionService: HS256 JWT via PyJWT
    """

    def issue(self, user_id: UUID) -> str:
        """Mint a signed session token for ``user_id``."""
        ...

    def verify(self, token: str | None) -> Result[UUID, AuthenticationError]:
        """Verify a token and return the user id it binds.

        Returns:
            Failure(AuthenticationError(code=UNAUTHORIZED)) for a missing,
            malformed, expired or tampered token.
        """
        ...
