"""In-memory user repository implementing UserRepository.

Behaves like a document store with sparse unique indexes: every unique
field (username, email, wallet_address, federated_id) has its own index and
absent values are simply not indexed. Mutations are serialized behind an
``asyncio.Lock`` so a uniqueness check and its write are atomic.

Stored records are copies; callers must ``update`` to persist changes made
to an entity they looked up.
"""

import asyncio
from dataclasses import replace
from uuid import UUID

from rend_auth.domain.entities import User
from rend_auth.domain.errors import DuplicateKeyError

UNIQUE_FIELDS = ("username", "email", "wallet_address", "federated_id")


class InMemoryUserRepository:
    """Process-local user store.

    Note: Does NOT inherit from UserRepository (uses structural typing).

    Example:
        >>> repo = InMemoryUserRepository()
        >>> await repo.insert(user)
        >>> await repo.find_by_email("user@example.com")
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._indexes: dict[str, dict[str, UUID]] = {
            field: {} for field in UNIQUE_FIELDS
        }
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def find_by_email(self, email: str) -> User | None:
        return self._find_by("email", email)

    async def find_by_username(self, username: str) -> User | None:
        return self._find_by("username", username)

    async def find_by_email_or_username(
        self, email: str, username: str
    ) -> User | None:
        return self._find_by("email", email) or self._find_by("username", username)

    async def find_by_wallet_address(self, wallet_address: str) -> User | None:
        return self._find_by("wallet_address", wallet_address)

    async def find_by_federated_id(self, federated_id: str) -> User | None:
        return self._find_by("federated_id", federated_id)

    async def find_by_reset_token_hash(self, token_hash: str) -> User | None:
        for user in self._users.values():
            if user.reset_token_hash == token_hash:
                return replace(user)
        return None

    async def insert(self, user: User) -> None:
        """Insert a new user.

        Raises:
            DuplicateKeyError: If the id or a unique field is already taken.
        """
        async with self._lock:
            if user.id in self._users:
                raise DuplicateKeyError("id")
            self._check_unique(user)
            self._store(user)

    async def update(self, user: User) -> None:
        """Replace a stored user.

        Raises:
            KeyError: If the user was never inserted.
            DuplicateKeyError: If a changed unique field is taken.
        """
        async with self._lock:
            existing = self._users.get(user.id)
            if existing is None:
                raise KeyError(str(user.id))
            self._check_unique(user)
            self._unindex(existing)
            self._store(user)

    def __len__(self) -> int:
        return len(self._users)

    def _find_by(self, field: str, value: str) -> User | None:
        user_id = self._indexes[field].get(value)
        if user_id is None:
            return None
        return replace(self._users[user_id])

    def _check_unique(self, user: User) -> None:
        for field in UNIQUE_FIELDS:
            value = getattr(user, field)
            if value is None:
                continue
            owner = self._indexes[field].get(value)
            if owner is not None and owner != user.id:
                raise DuplicateKeyError(field)

    def _store(self, user: User) -> None:
        stored = replace(user)
        self._users[stored.id] = stored
        for field in UNIQUE_FIELDS:
            value = getattr(stored, field)
            if value is not None:
                self._indexes[field][value] = stored.id

    def _unindex(self, user: User) -> None:
        for field in UNIQUE_FIELDS:
            value = getattr(user, field)
            if value is not None:
                self._indexes[field].pop(value, None)
