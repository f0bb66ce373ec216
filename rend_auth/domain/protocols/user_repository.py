"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from rend_auth.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    The store behaves like a key-indexed document store with sparse unique
    indexes on username, email, wallet_address and federated_id: absent
    values never collide.

    Methods:
        find_by_*: Lookup by unique field (None when absent)
        find_by_email_or_username: Single combined lookup used by register
        insert: Create new user
        update: Replace an existing user

    Example Implementation:
        >>> class InMemoryUserRepository:
        ...     async def find_by_email(self, email: str) -> User | None:
        ...         ...
    """

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by normalized (lowercase) email address."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username (case-sensitive)."""
        ...

    async def find_by_email_or_username(
        self, email: str, username: str
    ) -> User | None:
        """Find a user matching either the email or the username.

        When one user matches the email and another the username, the email
        match is returned.
        """
        ...

    async def find_by_wallet_address(self, wallet_address: str) -> User | None:
        """Find user by normalized wallet address."""
        ...

    async def find_by_federated_id(self, federated_id: str) -> User | None: ...

    async def find_by_reset_token_hash(self, token_hash: str) -> User | None:
        """Find user with a pending reset whose stored hash matches.

        Expiry is not checked here; callers compare ``reset_token_expires_at``.
        """
        ...

    async def insert(self, user: User) -> None:
        """Create new user.

        Raises:
            DuplicateKeyError: If a unique field collides with another user.
        """
        ...

    async def update(self, user: User) -> None:
        """Persist changes to an existing user.

        Raises:
            DuplicateKeyError: If a changed unique field collides.
            KeyError: If the user does not exist.
        """
        ...
