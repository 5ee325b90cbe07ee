"""Device session writer.

Owns the two stores that make up a device session: the durable refresh
token store and the ephemeral access token cache. Every write or delete
touches both, concurrently, and waits for both.

Failure semantics:
    - The first exception from either store propagates to the caller.
    - No compensation: the other store's operation may already be applied.
    - No lock spans clear() and save(); two concurrent sign-ins for the
      same device may interleave.

Usage:
    writer = DeviceSessionWriter(refresh_token_repo, access_token_cache)

    await writer.clear(user.id, device_id)
    await writer.save(user.id, device_id, tokens)
"""

import asyncio
from uuid import UUID

from src.domain.protocols import (
    AccessTokenCacheProtocol,
    AuthTokens,
    RefreshTokenRepository,
)


class DeviceSessionWriter:
    """Concurrent fan-out over the refresh token store and access token cache."""

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        access_token_cache: AccessTokenCacheProtocol,
    ) -> None:
        """Initialize writer with both session stores.

        Args:
            refresh_token_repo: Durable (user, device) -> refresh token store.
            access_token_cache: Ephemeral (user, device) -> access token cache.
        """
        self._refresh_token_repo = refresh_token_repo
        self._access_token_cache = access_token_cache

    async def save(self, user_id: UUID, device_id: str, tokens: AuthTokens) -> None:
        """Store the refresh token and cache the access token.

        Args:
            user_id: Session owner.
            device_id: Session device.
            tokens: Token pair to store.
        """
        await asyncio.gather(
            self._refresh_token_repo.save_token(
                user_id, device_id, tokens.refresh_token
            ),
            self._access_token_cache.save_token(
                user_id, device_id, tokens.access_token
            ),
        )

    async def clear(self, user_id: UUID, device_id: str) -> None:
        """Delete the refresh token and drop the cached access token.

        Succeeds when neither exists.
        """
        await asyncio.gather(
            self._refresh_token_repo.delete(user_id, device_id),
            self._access_token_cache.remove_token(user_id, device_id),
        )
