"""Cache key construction utilities.

All keys follow the pattern: {prefix}:{domain}:{resource}:{id}

Usage:
    from src.core.config import get_settings
    from src.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix=get_settings().cache_key_prefix)
    key = keys.access_token(user_id, "d1")
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class CacheKeys:
    """Centralized cache key construction utilities.

    Attributes:
        prefix: Cache key prefix (typically "auth").

    Example:
        keys = CacheKeys(prefix="auth")
        key = keys.access_token(user_id, "d1")  # "auth:auth:access:{user_id}:d1"
    """

    prefix: str

    def access_token(self, user_id: UUID, device_id: str) -> str:
        """Access token cache key for one device session.

        Pattern: {prefix}:auth:access:{user_id}:{device_id}

        Args:
            user_id: User UUID.
            device_id: Device identifier.

        Returns:
            Cache key string.
        """
        return f"{self.prefix}:auth:access:{user_id}:{device_id}"
