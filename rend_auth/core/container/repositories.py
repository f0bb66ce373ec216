"""Repository dependency factories.

Both stores are application-scoped: the in-memory stores hold their data
for the life of the process, and the Redis store shares one pool.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from rend_auth.core.config import get_settings

if TYPE_CHECKING:
    from rend_auth.domain.protocols import NonceRepository, UserRepository


@lru_cache()
def get_user_repository() -> "UserRepository":
    from rend_auth.infrastructure.persistence import InMemoryUserRepository

    return InMemoryUserRepository()


@lru_cache()
def get_nonce_repository() -> "NonceRepository":
    """Get nonce repository singleton.

    Returns correct adapter based on NONCE_BACKEND:
        - 'memory': InMemoryNonceRepository (single process)
        - 'redis': RedisNonceRepository (native key TTL)
    """
    if get_settings().nonce_backend == "redis":
        from rend_auth.core.container.infrastructure import get_redis
        from rend_auth.infrastructure.persistence import RedisNonceRepository

        return RedisNonceRepository(redis_client=get_redis())

    from rend_auth.infrastructure.persistence import InMemoryNonceRepository

    return InMemoryNonceRepository()
