"""NonceRepository protocol for wallet challenge persistence."""

from typing import Protocol

from rend_auth.domain.entities.nonce import Nonce


class NonceRepository(Protocol):
    """Nonce store protocol (port).

    Requirements:
        - ``consume`` is an atomic compare-and-set on ``used: False -> True``.
          Concurrent consumers of the same nonce see at most one success.
        - Expired nonces are evicted automatically (TTL) and are never
          returned by ``consume`` even before eviction runs.

    Implementations:
        - InMemoryNonceRepository: asyncio.Lock + lazy purge
        - RedisNonceRepository: native key TTL + SET XX GET
    """

    async def insert(self, nonce: Nonce) -> None:
        """Persist a freshly issued nonce."""
        ...

    async def consume(self, wallet_address: str, value: str) -> Nonce | None:
        """Atomically find an unused, unexpired nonce and mark it used.

        Args:
            wallet_address: Normalized wallet address.
            value: Nonce value from the signed challenge.

        Returns:
            The consumed nonce (``used=True``), or None when no matching
            unused nonce exists.
        """
        ...
