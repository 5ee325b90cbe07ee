"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User, UserCredentials


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve full user by ID
        find_by_email: Retrieve full user by email
        find_credentials_by_email: Retrieve only id + password hash by email
        exists_by_email: Email uniqueness check
        save: Create new user
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Load only the id and password hash for an email.

        Args:
            email: User's email address (case-insensitive).

        Returns:
            UserCredentials if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists.

        Args:
            email: Email address to check (case-insensitive).

        Returns:
            True if user exists, False otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Args:
            user: User entity to persist.
        """
        ...
