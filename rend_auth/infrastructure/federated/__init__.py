"""Federated identity adapters."""

from rend_auth.infrastructure.federated.google_identity_verifier import (
    GoogleIdentityVerifier,
)

__all__ = ["GoogleIdentityVerifier"]
