"""JWT session token service (adapter).

Implements SessionTokenProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256 with a secret of at least 256 bits
    - 30-day expiration by default
    - Unique JWT ID (jti) per token
    - Stateless validation (no store lookup)
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from rend_auth.core.config import SessionTokenConfig
from rend_auth.core.constants import MIN_SECRET_KEY_LENGTH
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import AuthenticationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage


class JWTSessionService:
    """Session token issuance and verification.

    Usage:
        service = JWTSessionService(SessionTokenConfig(secret_key=key))
        token = service.issue(user.id)

        match service.verify(token):
            case Success(value=user_id):
                ...
            case Failure(error=error):
                ...  # error.code == ErrorCode.UNAUTHORIZED
    """

    def __init__(self, config: SessionTokenConfig) -> None:
        """Initialize session service.

        Raises:
            ValueError: If the secret key is shorter than 32 characters.
        """
        if len(config.secret_key) < MIN_SECRET_KEY_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._config = config

    def issue(self, user_id: UUID) -> str:
        """Mint a session token.

        Claims: sub (user id), iat, exp (iat + expire_days), jti.

        Example:
            >>> token = service.issue(user.id)
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(days=self._config.expire_days)

        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(
            payload, self._config.secret_key, algorithm=self._config.algorithm
        )
        return token

    def verify(self, token: str | None) -> Result[UUID, AuthenticationError]:
        """Verify a session token and return the user id it binds.

        Returns:
            Success(user_id), or Failure(UNAUTHORIZED) for a missing,
            malformed, expired or tampered token, or a non-UUID subject.
        """
        if not token:
            return self._unauthorized()

        try:
            # PyJWT validates signature and exp
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except InvalidTokenError:
            return self._unauthorized()

        try:
            return Success(value=UUID(str(payload["sub"])))
        except ValueError:
            return self._unauthorized()

    @staticmethod
    def _unauthorized() -> Failure[AuthenticationError]:
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.UNAUTHORIZED,
                message=AuthErrorMessage.NOT_AUTHORIZED,
            )
        )
