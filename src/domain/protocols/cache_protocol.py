"""Cache protocol for key-value storage.

Defines the low-level cache operations the auth layer builds on.
Infrastructure adapters (RedisAdapter) implement this without inheritance.

All operations return Result types; callers decide whether a cache
failure is fatal for their flow.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the application needs from a key-value cache."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        ...

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[None, DomainError]:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key from cache.

        Args:
            key: Cache key.

        Returns:
            Result with True if the key existed, False otherwise, or CacheError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check whether a key exists.

        Args:
            key: Cache key.

        Returns:
            Result with existence flag, or CacheError.
        """
        ...

    async def ttl(self, key: str) -> Result[int | None, DomainError]:
        """Get remaining time to live for a key.

        Args:
            key: Cache key.

        Returns:
            Result with seconds remaining, None if the key has no expiry
            or does not exist, or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity.

        Returns:
            Result with True if reachable, or CacheError.
        """
        ...
