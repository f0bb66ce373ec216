"""Password reset token service.

Token Strategy:
    - 20-byte random hex string (40 characters) sent to the user
    - Only its SHA-256 hex digest is stored on the user record
    - 60-minute expiration by default
    - Single use (fields cleared on redemption)
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from rend_auth.core.constants import RESET_TOKEN_BYTES


class PasswordResetTokenService:
    """Password reset token generation service.

    Usage:
        service = PasswordResetTokenService(expiration_minutes=60)

        token = service.generate_token()
        user.set_reset_token(
            service.hash_token(token),
            service.calculate_expiration(),
        )
        reset_url = f"{base}/api/auth/reset-password/{token}"
    """

    def __init__(self, expiration_minutes: int = 60) -> None:
        self._expiration_minutes = expiration_minutes

    def generate_token(self) -> str:
        """Generate password reset token.

        Returns:
            40-character hex string (20 bytes of entropy).
        """
        return secrets.token_hex(RESET_TOKEN_BYTES)

    def hash_token(self, token: str) -> str:
        """Hash a reset token for storage and lookup.

        The token already carries 160 bits of entropy, so a fast unsalted
        digest is sufficient and keeps lookup by hash possible.

        Returns:
            64-character SHA-256 hex digest.
        """
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(minutes=self._expiration_minutes)
