"""User domain entity for authentication.

Pure business logic, no framework dependencies.

The password hash is set once when the user is created; nothing in the
auth flows mutates it afterwards.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.enums import UserRole


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier (UUIDv7).
        email: Unique email address.
        password_hash: Bcrypt hashed password (never plaintext).
        role: User role (normal or admin).
        name: Optional display name.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User.register(
        ...     email="user@example.com",
        ...     password_hash="$2b$10$...",
        ... )
        >>> user.role
        <UserRole.NORMAL: 'normal'>
    """

    id: UUID
    email: str
    password_hash: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
    name: str | None = None

    @classmethod
    def register(
        cls,
        *,
        email: str,
        password_hash: str,
        name: str | None = None,
        role: UserRole = UserRole.NORMAL,
    ) -> "User":
        """Build a brand-new user with a fresh id and timestamps.

        Args:
            email: User email address.
            password_hash: Already-hashed password.
            name: Optional display name.
            role: Role to assign (defaults to normal).

        Returns:
            New User entity (not yet persisted).
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            email=email,
            password_hash=password_hash,
            role=role,
            name=name,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_admin(self) -> bool:
        """True if the user holds the admin role."""
        return self.role == UserRole.ADMIN


@dataclass(frozen=True, kw_only=True)
class UserCredentials:
    """Credential projection of a user (id and password hash only).

    Returned by the email lookup used during sign-in, which deliberately
    loads nothing else.
    """

    id: UUID
    password_hash: str
