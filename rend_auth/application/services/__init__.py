"""Application services shared by several handlers."""

from rend_auth.application.services.authorization import require_role
from rend_auth.application.services.bearer_token import extract_bearer_token
from rend_auth.application.services.identity_resolver import (
    IdentityResolver,
    ResolvedIdentity,
)
from rend_auth.application.services.nonce_service import (
    NonceService,
    build_challenge_message,
)
from rend_auth.application.services.signature_verifier_registry import (
    SignatureVerifierRegistry,
)

__all__ = [
    "IdentityResolver",
    "NonceService",
    "ResolvedIdentity",
    "SignatureVerifierRegistry",
    "build_challenge_message",
    "extract_bearer_token",
    "require_role",
]
