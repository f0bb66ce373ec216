"""Federated identity provider protocol (OAuth / OpenID Connect).

The provider is modelled as a remote verifier returning a claims payload.
"""

from dataclasses import dataclass
from typing import Protocol

from rend_auth.core.errors import ConfigurationError
from rend_auth.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class FederatedClaims:
    """Verified claims extracted from a federated identity token.

    Attributes:
        subject_id: Provider-assigned stable subject id ("sub").
        email: Email claim, normalized lowercase when present.
        display_name: Human display name ("name"), if provided.
        email_verified: Whether the provider verified the email.
    """

    subject_id: str
    email: str | None
    display_name: str | None
    email_verified: bool = False


class FederatedIdentityProtocol(Protocol):
    """Federated identity verifier (port).

    Verification failures are returned as ``Failure`` with a short reason
    string (e.g. "expired", "invalid_audience") for logging; callers map
    every failure to one generic rejection.
    """

    def is_configured(self) -> bool:
        """True when client id, client secret and redirect URI are all set."""
        ...

    async def verify(self, token: str) -> Result[FederatedClaims, str]:
        """Verify an ID token against the issuer's public key set."""
        ...

    def authorization_url(self, state: str | None = None) -> Result[str, ConfigurationError]:
        """Build the provider's consent-screen URL."""
        ...

    async def exchange_code(self, code: str) -> Result[FederatedClaims, str]:
        """Exchange an authorization code for an ID token and verify it."""
        ...
