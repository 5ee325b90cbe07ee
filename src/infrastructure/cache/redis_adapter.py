"""Result-returning wrapper around redis.asyncio.

Implements CacheProtocol structurally. RedisError from any call becomes a
Failure(CacheError) tagged with an InfrastructureErrorCode; nothing is
raised to the caller.
"""

from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    error: RedisError,
    **details: Any,
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=message,
            details={**details, "error": str(error)},
        )
    )


class RedisAdapter:
    """CacheProtocol over an async Redis client (string values only)."""

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Return the decoded value, or None on a miss."""
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                e,
                key=key,
            )
        # Redis returns bytes unless decode_responses is set
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Store a value, with SETEX when a TTL in seconds is given."""
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                e,
                key=key,
                ttl=ttl,
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete a key. Success(False) when it was already absent."""
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                e,
                key=key,
            )
        return Success(value=deleted_count > 0)

    async def exists(self, key: str) -> Result[bool, CacheError]:
        """Check if key exists in Redis."""
        try:
            exists_count = await self._redis.exists(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to check existence of key '{key}'",
                e,
                key=key,
            )
        return Success(value=exists_count > 0)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        """Get time to live for key in Redis.

        Returns:
            Result with seconds until expiration, None if no TTL or key
            doesn't exist, or CacheError.
        """
        try:
            ttl_value = await self._redis.ttl(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get TTL for key '{key}'",
                e,
                key=key,
            )
        # Redis returns -2 if key doesn't exist, -1 if no expiration
        if ttl_value in (-2, -1):
            return Success(value=None)
        return Success(value=ttl_value)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                e,
            )
        return Success(value=True)
