"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (cache).

Architecture:
- Adapters catch client exceptions and map them to CacheError values
- CacheError inherits from DomainError (not Exception) and travels in Result
- Store facades that must propagate failures raise AccessTokenCacheError,
  which carries the CacheError that caused it
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors.

    Wraps Redis exceptions and provides consistent error handling.
    """

    pass


class AccessTokenCacheError(Exception):
    """Raised when the access token cache cannot complete an operation.

    Attributes:
        error: Underlying error value from the cache (a CacheError from RedisAdapter).
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error
