"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("secret123")
        is_valid = password_service.verify_password("secret123", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (salted, one-way)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including for an
            invalid hash format).
        """
        ...

    @property
    def dummy_hash(self) -> str:
        """A valid hash to compare against when no stored hash exists."""
        ...
