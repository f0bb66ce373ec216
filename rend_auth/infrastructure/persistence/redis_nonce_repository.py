"""Redis nonce repository implementing NonceRepository.

Each nonce is one key with a native TTL (``EX``), so Redis evicts it when
it expires. Consumption is a single ``SET ... XX KEEPTTL GET`` that writes
the used record and returns the previous one: only the caller that sees an
unused previous value wins.

Key format:
    nonce:{wallet_address}:{value}
"""

import json
from datetime import datetime

from redis.asyncio import Redis

from rend_auth.domain.entities import Nonce

KEY_PREFIX = "nonce"


class RedisNonceRepository:
    """Redis-backed nonce store.

    Note: Does NOT inherit from NonceRepository (uses structural typing).
    Redis errors propagate; handlers map them to an internal error.

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def insert(self, nonce: Nonce) -> None:
        ttl = nonce.ttl_remaining
        if ttl <= 0:
            return
        await self._redis.set(
            self._key(nonce.wallet_address, nonce.value),
            self._serialize(nonce),
            ex=ttl,
            nx=True,
        )

    async def consume(self, wallet_address: str, value: str) -> Nonce | None:
        key = self._key(wallet_address, value)
        raw = await self._redis.get(key)
        if raw is None:
            return None

        nonce = self._deserialize(raw)
        if not nonce.is_redeemable():
            return None

        consumed = nonce.mark_used()
        previous = await self._redis.set(
            key,
            self._serialize(consumed),
            xx=True,
            keepttl=True,
            get=True,
        )
        # Key evicted in between, or another caller consumed it first
        if previous is None or self._deserialize(previous).used:
            return None
        return consumed

    @staticmethod
    def _key(wallet_address: str, value: str) -> str:
        return f"{KEY_PREFIX}:{wallet_address}:{value}"

    @staticmethod
    def _serialize(nonce: Nonce) -> str:
        return json.dumps(
            {
                "wallet_address": nonce.wallet_address,
                "value": nonce.value,
                "used": nonce.used,
                "created_at": nonce.created_at.isoformat(),
                "expires_at": nonce.expires_at.isoformat(),
            }
        )

    @staticmethod
    def _deserialize(raw: str | bytes) -> Nonce:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = json.loads(text)
        return Nonce(
            wallet_address=data["wallet_address"],
            value=data["value"],
            used=data["used"],
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
        )
