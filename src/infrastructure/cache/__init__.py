"""Cache infrastructure package.

This package provides the Redis cache implementation.
All cache dependencies are managed through src.core.container.

Architecture:
- RedisAdapter: Concrete Redis implementation of CacheProtocol
- RedisAccessTokenCache: Per-device access token cache
- CacheKeys: Key construction
"""

from src.infrastructure.cache.access_token_cache import RedisAccessTokenCache
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "RedisAccessTokenCache",
    "RedisAdapter",
]
