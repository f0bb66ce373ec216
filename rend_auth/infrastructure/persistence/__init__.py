"""Persistence adapters for users and nonces."""

from rend_auth.infrastructure.persistence.in_memory_nonce_repository import (
    InMemoryNonceRepository,
)
from rend_auth.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from rend_auth.infrastructure.persistence.redis_nonce_repository import (
    RedisNonceRepository,
)

__all__ = [
    "InMemoryNonceRepository",
    "InMemoryUserRepository",
    "RedisNonceRepository",
]
