"""RefreshTokenRepository protocol (port) for domain layer.

Durable store of the current refresh token for each device session.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored
"""

from typing import Protocol
from uuid import UUID


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Invariant: at most one record per (user_id, device_id).

    Token Lifecycle:
        1. Saved on sign-up / sign-in
        2. Deleted then re-saved on sign-in and refresh (rotation)
        3. Deleted on logout

    Implementations:
        - RefreshTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def save_token(self, user_id: UUID, device_id: str, token: str) -> None:
        """Persist the refresh token for a device session.

        Args:
            user_id: User's unique identifier.
            device_id: Device identifier.
            token: Refresh token string.
        """
        ...

    async def delete(self, user_id: UUID, device_id: str) -> None:
        """Delete the refresh token for a device session.

        Idempotent: no error when no record exists.

        Args:
            user_id: User's unique identifier.
            device_id: Device identifier.
        """
        ...

    async def find_token(self, user_id: UUID, device_id: str) -> str | None:
        """Return the current refresh token for a device session.

        Args:
            user_id: User's unique identifier.
            device_id: Device identifier.

        Returns:
            Token string if a record exists, None otherwise.
        """
        ...
