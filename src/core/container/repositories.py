"""Repository dependency factories.

Session-scoped repository instances. Each unit of work gets fresh
repository instances sharing one AsyncSession.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )


def get_user_repository(session: AsyncSession) -> "UserRepository":
    """Get user repository bound to a session.

    Usage:
        async with get_database().get_session() as session:
            user_repo = get_user_repository(session)
            user = await user_repo.find_by_email("user@example.com")
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


def get_refresh_token_repository(session: AsyncSession) -> "RefreshTokenRepository":
    """Get refresh token repository bound to a session."""
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return RefreshTokenRepository(session=session)
