"""Access token cache protocol.

Ephemeral (user, device) -> access token mapping used for fast request
authorization. Infrastructure implements it with Redis.
"""

from typing import Protocol
from uuid import UUID


class AccessTokenCacheProtocol(Protocol):
    """Access token cache protocol (port).

    Invariant: at most one entry per (user_id, device_id).
    Write failures are raised, not swallowed.
    """

    async def save_token(self, user_id: UUID, device_id: str, token: str) -> None:
        """Cache the access token for a device session.

        Overwrites any existing entry for the same pair.

        Args:
            user_id: User identifier.
            device_id: Device identifier.
            token: Access token string.
        """
        ...

    async def remove_token(self, user_id: UUID, device_id: str) -> None:
        """Remove the cached access token for a device session.

        Idempotent: no error when no entry exists.

        Args:
            user_id: User identifier.
            device_id: Device identifier.
        """
        ...

    async def get_token(self, user_id: UUID, device_id: str) -> str | None:
        """Get the cached access token for a device session.

        Args:
            user_id: User identifier.
            device_id: Device identifier.

        Returns:
            Token if cached, None otherwise.
        """
        ...
