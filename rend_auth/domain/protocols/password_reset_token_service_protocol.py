"""Password reset token service protocol."""

from datetime import datetime
from typing import Protocol


class PasswordResetTokenServiceProtocol(Protocol):
    """Generate, hash and time-bound password reset tokens.

    Only ``hash_token(token)`` is ever stored. The raw token travels to the
    user inside the reset link.
    """

    def generate_token(self) -> str:
        """Generate a random reset token (40 hex characters)."""
        ...

    def hash_token(self, token: str) -> str:
        """One-way hash of a reset token (SHA-256 hex digest)."""
        ...

    def calculate_expiration(self) -> datetime:
        """Expiry timestamp (UTC) for a token issued now."""
        ...
