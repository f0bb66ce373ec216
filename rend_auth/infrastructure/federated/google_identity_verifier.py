"""Google identity verifier implementing FederatedIdentityProtocol.

Verifies Google ID tokens (OpenID Connect) against Google's published JWKS
and handles the authorization-code flow.

Configuration comes from ``FederatedProviderConfig`` (built from settings):
    - client_id / client_secret / redirect_uri: OAuth client
    - jwks_url: Google signing keys
    - token_url: authorization-code exchange endpoint
    - auth_url: consent screen

Verification checks:
    - RS256 signature against the key named by the token's ``kid``
    - ``aud`` equals the client id
    - ``iss`` is accounts.google.com
    - ``exp`` / ``iat`` present and not expired
"""

import asyncio
from collections.abc import Callable
from typing import Any
from urllib.parse import urlencode

import httpx
import jwt
import structlog
from jwt import PyJWKClient, PyJWKClientError
from jwt.exceptions import (
    ExpiredSignatureError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidTokenError,
)

from rend_auth.core.config import FederatedProviderConfig
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import ConfigurationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.protocols.federated_identity_protocol import FederatedClaims

logger = structlog.get_logger(__name__)

GOOGLE_SCOPES = (
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
)

# Resolves the verification key for a raw JWT (blocking; run off the loop)
SigningKeyResolver = Callable[[str], Any]


class GoogleIdentityVerifier:
    """Google OAuth / OpenID Connect adapter.

    Attributes:
        config: Immutable OAuth client configuration.
        timeout: HTTP timeout in seconds for the code exchange.

    Example:
        >>> verifier = GoogleIdentityVerifier(settings.federated_provider_config())
        >>> result = await verifier.verify(id_token)
        >>> match result:
        ...     case Success(value=claims):
        ...         claims.subject_id
    """

    def __init__(
        self,
        config: FederatedProviderConfig,
        *,
        signing_key_resolver: SigningKeyResolver | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize Google identity verifier.

        Args:
            config: OAuth client configuration.
            signing_key_resolver: Returns the public key for a token. Defaults
                to a cached PyJWKClient over ``config.jwks_url``.
            timeout: HTTP timeout in seconds.
        """
        self._config = config
        self._timeout = timeout
        if signing_key_resolver is None:
            jwks_client = PyJWKClient(config.jwks_url, cache_keys=True)

            def resolve_from_jwks(token: str) -> Any:
                return jwks_client.get_signing_key_from_jwt(token).key

            signing_key_resolver = resolve_from_jwks

        self._resolve_signing_key = signing_key_resolver

    def is_configured(self) -> bool:
        return self._config.is_configured

    async def verify(self, token: str) -> Result[FederatedClaims, str]:
        """Verify a Google ID token and extract its claims.

        Returns:
            Success(FederatedClaims), or Failure with a short reason string
            ("unconfigured", "missing_token", "expired", "invalid_audience",
            "invalid_issuer", "invalid_token", "key_unavailable").
        """
        if not self.is_configured():
            return Failure(error="unconfigured")
        if not token:
            return Failure(error="missing_token")

        try:
            key = await asyncio.to_thread(self._resolve_signing_key, token)
        except (PyJWKClientError, InvalidTokenError) as e:
            logger.warning(
                "google_signing_key_unavailable",
                error_type=type(e).__name__,
            )
            return Failure(error="key_unavailable")

        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=["RS256"],
                audience=self._config.client_id,
                issuer=list(self._config.issuers),
                options={"require": ["sub", "aud", "iss", "exp", "iat"]},
            )
        except ExpiredSignatureError:
            return Failure(error="expired")
        except InvalidAudienceError:
            return Failure(error="invalid_audience")
        except InvalidIssuerError:
            return Failure(error="invalid_issuer")
        except InvalidTokenError as e:
            logger.debug("google_token_rejected", error_type=type(e).__name__)
            return Failure(error="invalid_token")

        return Success(value=self._claims_from_payload(payload))

    def authorization_url(
        self, state: str | None = None
    ) -> Result[str, ConfigurationError]:
        """Build the Google consent-screen URL.

        Requests the userinfo email and profile scopes with offline access
        and a forced consent prompt.
        """
        if not self.is_configured():
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.PROVIDER_UNCONFIGURED,
                    message=AuthErrorMessage.PROVIDER_UNCONFIGURED,
                )
            )

        params = {
            "client_id": self._config.client_id,
            "redirect_uri": self._config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(GOOGLE_SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }
        if state:
            params["state"] = state

        return Success(value=f"{self._config.auth_url}?{urlencode(params)}")

    async def exchange_code(self, code: str) -> Result[FederatedClaims, str]:
        """Exchange an authorization code for tokens and verify the ID token.

        Returns:
            Success(FederatedClaims), or Failure with a short reason string.
        """
        if not self.is_configured():
            return Failure(error="unconfigured")
        if not code:
            return Failure(error="missing_code")

        logger.info("google_code_exchange_started")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._config.token_url,
                    data={
                        "grant_type": "authorization_code",
                        "code": code,
                        "client_id": self._config.client_id,
                        "client_secret": self._config.client_secret,
                        "redirect_uri": self._config.redirect_uri,
                    },
                )
        except httpx.TimeoutException as e:
            logger.warning("google_code_exchange_timeout", error=str(e))
            return Failure(error="exchange_timeout")
        except httpx.RequestError as e:
            logger.warning("google_code_exchange_connection_error", error=str(e))
            return Failure(error="exchange_unreachable")

        if response.status_code != 200:
            logger.warning(
                "google_code_exchange_rejected",
                status_code=response.status_code,
            )
            return Failure(error="exchange_rejected")

        try:
            id_token = response.json()["id_token"]
        except (ValueError, KeyError, TypeError):
            logger.warning("google_code_exchange_missing_id_token")
            return Failure(error="missing_id_token")

        return await self.verify(id_token)

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> FederatedClaims:
        email = payload.get("email")
        email_verified = payload.get("email_verified", False)
        # Google has historically sent this claim as the string "true"
        if isinstance(email_verified, str):
            email_verified = email_verified.lower() == "true"

        return FederatedClaims(
            subject_id=str(payload["sub"]),
            email=email.strip().lower() if isinstance(email, str) else None,
            display_name=payload.get("name"),
            email_verified=bool(email_verified),
        )
