"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes carried inside Failure results
- Settings and the dependency container

The core module has NO dependencies on other application layers
(the container imports lazily).
"""

from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
