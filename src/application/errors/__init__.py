"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    AuthError: Auth flow error messages
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    AuthError,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "AuthError",
]
