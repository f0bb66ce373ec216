"""In-memory nonce repository implementing NonceRepository.

Expired nonces are purged lazily on every access, which stands in for a
store's background TTL eviction. ``consume`` runs under an ``asyncio.Lock``
so the used-flag transition is a compare-and-set.
"""

import asyncio
from datetime import UTC, datetime

from rend_auth.domain.entities import Nonce


class InMemoryNonceRepository:
    """Process-local nonce store keyed by (wallet_address, value)."""

    def __init__(self) -> None:
        self._nonces: dict[tuple[str, str], Nonce] = {}
        self._lock = asyncio.Lock()

    async def insert(self, nonce: Nonce) -> None:
        async with self._lock:
            self._purge_expired()
            self._nonces[(nonce.wallet_address, nonce.value)] = nonce

    async def consume(self, wallet_address: str, value: str) -> Nonce | None:
        """Mark a matching unused, unexpired nonce as used.

        Returns:
            The consumed nonce, or None if absent, used or expired.
        """
        async with self._lock:
            self._purge_expired()
            key = (wallet_address, value)
            nonce = self._nonces.get(key)
            if nonce is None or not nonce.is_redeemable():
                return None
            consumed = nonce.mark_used()
            self._nonces[key] = consumed
            return consumed

    def __len__(self) -> int:
        return len(self._nonces)

    def _purge_expired(self) -> None:
        now = datetime.now(UTC)
        expired = [key for key, nonce in self._nonces.items() if nonce.is_expired(now)]
        for key in expired:
            del self._nonces[key]
