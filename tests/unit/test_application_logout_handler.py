"""Unit tests for LogoutHandler.

Tests cover:
- Logout clears both stores for the device
- Logout is idempotent when no session exists
- Store failures propagate
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import Logout
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.services import DeviceSessionWriter
from src.core.enums import ErrorCode
from src.core.result import Success
from src.infrastructure.errors import AccessTokenCacheError, CacheError


def create_handler() -> tuple[LogoutHandler, AsyncMock, AsyncMock]:
    refresh_token_repo = AsyncMock()
    access_token_cache = AsyncMock()
    handler = LogoutHandler(
        session_writer=DeviceSessionWriter(
            refresh_token_repo=refresh_token_repo,
            access_token_cache=access_token_cache,
        ),
        logger=Mock(),
    )
    return handler, refresh_token_repo, access_token_cache


@pytest.mark.unit
class TestLogoutHandler:
    """Test logout scenarios."""

    async def test_logout_clears_both_stores_for_device(self):
        # Arrange
        handler, refresh_token_repo, access_token_cache = create_handler()
        user_id = uuid7()

        # Act
        result = await handler.handle(Logout(user_id=user_id, device_id="d1"))

        # Assert
        assert isinstance(result, Success)
        assert result.value is None
        refresh_token_repo.delete.assert_awaited_once_with(user_id, "d1")
        access_token_cache.remove_token.assert_awaited_once_with(user_id, "d1")

    async def test_logout_twice_succeeds(self):
        # Arrange
        handler, refresh_token_repo, _ = create_handler()
        command = Logout(user_id=uuid7(), device_id="d1")

        # Act
        first = await handler.handle(command)
        second = await handler.handle(command)

        # Assert
        assert isinstance(first, Success)
        assert isinstance(second, Success)
        assert refresh_token_repo.delete.await_count == 2

    async def test_logout_cache_failure_propagates(self):
        # Arrange
        handler, _, access_token_cache = create_handler()
        access_token_cache.remove_token.side_effect = AccessTokenCacheError(
            CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="redis down")
        )

        # Act / Assert
        with pytest.raises(AccessTokenCacheError):
            await handler.handle(Logout(user_id=uuid7(), device_id="d1"))
