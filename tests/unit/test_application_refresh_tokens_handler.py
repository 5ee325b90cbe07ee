"""Unit tests for RefreshTokensHandler.

Tests cover:
- Rotation returns only the new token pair
- Old session deleted before the new one is written
- Missing user (NotFound, no store activity)
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import RefreshTokens
from src.application.commands.handlers.refresh_tokens_handler import (
    RefreshTokensHandler,
)
from src.application.errors import ApplicationErrorCode, AuthError
from src.application.services import DeviceSessionWriter
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.protocols import AuthTokens


def create_user() -> User:
    now = datetime.now(UTC)
    return User(
        id=uuid7(),
        email="a@x.com",
        password_hash="$2b$10$hashed",
        role=UserRole.NORMAL,
        created_at=now,
        updated_at=now,
    )


def create_handler(user: User | None) -> tuple[RefreshTokensHandler, Mock]:
    mocks = Mock()
    mocks.attach_mock(AsyncMock(), "user_repo")
    mocks.attach_mock(AsyncMock(), "refresh_token_repo")
    mocks.attach_mock(AsyncMock(), "access_token_cache")
    mocks.attach_mock(Mock(), "token_service")

    mocks.user_repo.find_by_id.return_value = user
    mocks.token_service.generate_auth_tokens.return_value = AuthTokens(
        access_token="access-3", refresh_token="refresh-3"
    )

    handler = RefreshTokensHandler(
        user_repo=mocks.user_repo,
        token_service=mocks.token_service,
        session_writer=DeviceSessionWriter(
            refresh_token_repo=mocks.refresh_token_repo,
            access_token_cache=mocks.access_token_cache,
        ),
        logger=Mock(),
    )
    return handler, mocks


@pytest.mark.unit
class TestRefreshTokensHandlerSuccess:
    """Test successful token rotation."""

    async def test_refresh_returns_only_new_tokens(self):
        # Arrange
        user = create_user()
        handler, _ = create_handler(user)

        # Act
        result = await handler.handle(RefreshTokens(user_id=user.id, device_id="d1"))

        # Assert
        assert isinstance(result, Success)
        assert result.value == AuthTokens(
            access_token="access-3", refresh_token="refresh-3"
        )

    async def test_refresh_deletes_old_session_before_writing_new_one(self):
        # Arrange
        user = create_user()
        handler, mocks = create_handler(user)

        # Act
        await handler.handle(RefreshTokens(user_id=user.id, device_id="d1"))

        # Assert
        names = [
            c[0]
            for c in mocks.mock_calls
            if c[0].startswith(("refresh_token_repo.", "access_token_cache."))
        ]
        assert sorted(names[:2]) == [
            "access_token_cache.remove_token",
            "refresh_token_repo.delete",
        ]
        assert sorted(names[2:]) == [
            "access_token_cache.save_token",
            "refresh_token_repo.save_token",
        ]

    async def test_refresh_issues_tokens_for_same_device(self):
        user = create_user()
        handler, mocks = create_handler(user)

        await handler.handle(RefreshTokens(user_id=user.id, device_id="d1"))

        mocks.token_service.generate_auth_tokens.assert_called_once_with(
            user_id=user.id, device_id="d1", role=UserRole.NORMAL
        )
        mocks.refresh_token_repo.save_token.assert_awaited_once_with(
            user.id, "d1", "refresh-3"
        )
        mocks.access_token_cache.save_token.assert_awaited_once_with(
            user.id, "d1", "access-3"
        )


@pytest.mark.unit
class TestRefreshTokensHandlerUserMissing:
    """Test refresh for a user that no longer exists."""

    async def test_missing_user_returns_not_found(self):
        # Arrange
        user_id = uuid7()
        handler, _ = create_handler(None)

        # Act
        result = await handler.handle(RefreshTokens(user_id=user_id, device_id="d1"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.message == AuthError.USER_NOT_FOUND
        assert isinstance(result.error.domain_error, NotFoundError)
        assert result.error.domain_error.resource_id == str(user_id)

    async def test_missing_user_touches_no_store(self):
        handler, mocks = create_handler(None)

        await handler.handle(RefreshTokens(user_id=uuid7(), device_id="d1"))

        mocks.refresh_token_repo.delete.assert_not_called()
        mocks.access_token_cache.remove_token.assert_not_called()
        mocks.token_service.generate_auth_tokens.assert_not_called()
