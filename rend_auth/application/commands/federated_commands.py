"""Federated (Google) authentication commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AuthenticateFederated:
    """Authenticate with a provider-issued ID token.

    Attributes:
        assertion_token: Google ID token (JWT).
    """

    assertion_token: str


@dataclass(frozen=True, kw_only=True)
class AuthenticateFederatedCode:
    """Authenticate with an authorization code from the OAuth callback.

    Attributes:
        code: Authorization code from the provider redirect.
    """

    code: str
