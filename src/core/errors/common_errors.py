"""Common error classes shared by the auth flows.

Error Types:
- NotFoundError: Resource not found (user missing during refresh)
- ConflictError: Duplicate resource (email already registered)
- AuthenticationError: Bad credentials or failed password self-check

Usage:
    return Failure(error=ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message="Email already registered",
        resource_type="User",
        conflicting_field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials)."""

    pass
