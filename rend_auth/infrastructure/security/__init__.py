"""Security adapters: hashing, session tokens, reset tokens, wallet signatures."""

from rend_auth.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from rend_auth.infrastructure.security.evm_signature_verifier import (
    EvmSignatureVerifier,
)
from rend_auth.infrastructure.security.jwt_session_service import JWTSessionService
from rend_auth.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)
from rend_auth.infrastructure.security.solana_signature_verifier import (
    SolanaSignatureVerifier,
)

__all__ = [
    "BcryptPasswordService",
    "EvmSignatureVerifier",
    "JWTSessionService",
    "PasswordResetTokenService",
    "SolanaSignatureVerifier",
]
