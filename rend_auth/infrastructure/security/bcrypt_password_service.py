"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Salted, adaptive, one-way hash
    - Constant-time comparison via bcrypt.checkpw
    - Cost factor is logarithmic: each +1 doubles computation time
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from rend_auth.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("secret123")
        is_valid = password_service.verify_password("secret123", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Test suites use
                the bcrypt minimum of 4 to keep hashing fast.

        Raises:
            ValueError: If cost factor is outside 4..20.
        """
        if cost_factor < 4:
            msg = "Cost factor must be at least 4"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor
        self._dummy_hash: str | None = None

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...), 60 chars.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise. Invalid hash
            formats and oversized passwords return False.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False

    @property
    def dummy_hash(self) -> str:
        """Hash compared against when no stored hash exists.

        Lets login spend the same bcrypt work whether or not the account
        exists. Computed once, lazily.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash_password("dummy-password-for-timing")
        return self._dummy_hash
