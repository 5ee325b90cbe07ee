"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command handlers.
These carry data from handlers back to whatever surface calls them.

DTOs:
    - UserResponse: Public projection of a User (no password hash)
    - AuthUserResult: Result from SignUp / SignIn (user + tokens)

Token-only results (RefreshTokens) reuse AuthTokens from the domain
token protocol.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.protocols import AuthTokens


@dataclass(frozen=True, kw_only=True)
class UserResponse:
    """Public view of a user.

    Built by explicit field list so the password hash can never leak.

    Attributes:
        id: User's unique identifier.
        email: User's email address.
        name: Optional display name.
        role: User role.
        created_at: Account creation timestamp.
    """

    id: UUID
    email: str
    name: str | None
    role: UserRole
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Project a User entity onto the public fields."""
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            created_at=user.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthUserResult:
    """Response from successful sign-up or sign-in.

    Attributes:
        user: Public user projection.
        tokens: Newly issued token pair for the device.
    """

    user: UserResponse
    tokens: AuthTokens
