"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
the failure kind a caller needs to map the outcome (Conflict, Unauthorized,
NotFound).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    AuthError: Message constants shared by the auth flows
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message=AuthError.EMAIL_ALREADY_REGISTERED,
        ... )
    """

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class AuthError:
    """Auth flow error messages.

    Every credential failure (unknown email, wrong password, failed admin
    password self-check) uses INVALID_CREDENTIALS so callers cannot tell
    them apart.
    """

    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_ALREADY_REGISTERED = "Email already registered"
    USER_NOT_FOUND = "User not found"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Returned by
    command handlers inside a Failure.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
