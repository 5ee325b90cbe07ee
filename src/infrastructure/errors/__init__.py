"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import CacheError, AccessTokenCacheError
"""

from src.infrastructure.errors.infrastructure_error import (
    AccessTokenCacheError,
    CacheError,
    InfrastructureError,
)

__all__ = [
    "AccessTokenCacheError",
    "CacheError",
    "InfrastructureError",
]
