"""Centralized constants for internal implementation details.

These are fixed protocol details, NOT environment-specific configuration.
For environment-specific settings use ``rend_auth.core.config``.
"""

# =============================================================================
# Token and Key Lengths
# =============================================================================

NONCE_BYTES: int = 32
"""Random bytes per wallet challenge nonce (64 hex characters)."""

RESET_TOKEN_BYTES: int = 20
"""Random bytes per password reset token (40 hex characters)."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

MIN_SECRET_KEY_LENGTH: int = 32
"""Minimum session signing secret length (256 bits)."""

# =============================================================================
# Identity Rules
# =============================================================================

MIN_USERNAME_LENGTH: int = 3
MIN_PASSWORD_LENGTH: int = 6
MAX_PASSWORD_LENGTH: int = 72
"""bcrypt only considers the first 72 bytes of a password."""

FEDERATED_USERNAME_PREFIX: str = "user_"
FEDERATED_USERNAME_SUFFIX_LENGTH: int = 8

# =============================================================================
# Protocol Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""Authorization header prefix for session tokens."""

EVM_MESSAGE_PREFIX: str = "\x19Ethereum Signed Message:\n"
"""EIP-191 personal_sign prefix."""

RESET_PASSWORD_PATH: str = "/api/auth/reset-password"

# =============================================================================
# Limits
# =============================================================================

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Characters of a secret token that may appear in logs."""
