"""Redis implementation of AccessTokenCacheProtocol.

Holds the current access token for each (user, device) session so the
request-authorization path can check it without touching the database.

Key Pattern:
    - {prefix}:auth:access:{user_id}:{device_id} -> access token (string)

Architecture:
    - Implements AccessTokenCacheProtocol (structural typing)
    - Builds on CacheProtocol (RedisAdapter in production)
    - Entries expire with the access token lifetime
    - Cache failures are raised as AccessTokenCacheError (no fail-open):
      a session is only valid when both stores were written
"""

import logging
from typing import TypeVar
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Failure, Result
from src.domain.protocols.cache_protocol import CacheProtocol
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.errors import AccessTokenCacheError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisAccessTokenCache:
    """Redis implementation of AccessTokenCacheProtocol.

    Note: Does NOT inherit from AccessTokenCacheProtocol (uses structural typing).

    Attributes:
        _redis: Key-value cache returning Result values.
        _keys: Key builder.
        _ttl_seconds: Entry lifetime.
    """

    def __init__(
        self,
        redis_adapter: CacheProtocol,
        cache_keys: CacheKeys,
        ttl_seconds: int,
    ) -> None:
        """Initialize access token cache.

        Args:
            redis_adapter: Key-value cache (RedisAdapter).
            cache_keys: Key builder carrying the configured prefix.
            ttl_seconds: Entry lifetime, normally the access token lifetime.
        """
        self._redis = redis_adapter
        self._keys = cache_keys
        self._ttl_seconds = ttl_seconds

    async def save_token(self, user_id: UUID, device_id: str, token: str) -> None:
        """Cache the access token for a device session, replacing any entry.

        Raises:
            AccessTokenCacheError: If Redis rejects the write.
        """
        key = self._keys.access_token(user_id, device_id)
        self._unwrap(
            await self._redis.set(key, token, ttl=self._ttl_seconds),
            operation="save",
        )

    async def remove_token(self, user_id: UUID, device_id: str) -> None:
        """Remove the cached access token. No-op when absent.

        Raises:
            AccessTokenCacheError: If Redis rejects the delete.
        """
        key = self._keys.access_token(user_id, device_id)
        self._unwrap(await self._redis.delete(key), operation="remove")

    async def get_token(self, user_id: UUID, device_id: str) -> str | None:
        """Return the cached access token, or None on a miss.

        Raises:
            AccessTokenCacheError: If Redis cannot be read.
        """
        key = self._keys.access_token(user_id, device_id)
        return self._unwrap(await self._redis.get(key), operation="get")

    @staticmethod
    def _unwrap(result: Result[T, DomainError], *, operation: str) -> T:
        if isinstance(result, Failure):
            logger.error(
                "access_token_cache_operation_failed",
                extra={"operation": operation, "error": str(result.error)},
            )
            raise AccessTokenCacheError(result.error)
        return result.value
