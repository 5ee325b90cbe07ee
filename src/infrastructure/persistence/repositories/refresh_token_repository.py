"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

One row per (user_id, device_id). Callers delete before saving; a save
for a pair that already has a row raises IntegrityError from the unique
constraint.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.models.refresh_token import RefreshToken


class RefreshTokenRepository:
    """SQLAlchemy implementation of RefreshTokenRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     await repo.delete(user_id, "d1")
        ...     await repo.save_token(user_id, "d1", tokens.refresh_token)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save_token(self, user_id: UUID, device_id: str, token: str) -> None:
        """Insert the refresh token row for a device session.

        Args:
            user_id: User's unique identifier.
            device_id: Device identifier.
            token: Refresh token string.

        Raises:
            IntegrityError: If a row already exists for the pair.
        """
        self.session.add(
            RefreshToken(user_id=user_id, device_id=device_id, token=token)
        )
        await self.session.commit()

    async def delete(self, user_id: UUID, device_id: str) -> None:
        """Delete the refresh token row for a device session, if any.

        Args:
            user_id: User's unique identifier.
            device_id: Device identifier.
        """
        stmt = delete(RefreshToken).where(
            RefreshToken.user_id == user_id,
            RefreshToken.device_id == device_id,
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def find_token(self, user_id: UUID, device_id: str) -> str | None:
        """Return the stored refresh token for a device session."""
        stmt = select(RefreshToken.token).where(
            RefreshToken.user_id == user_id,
            RefreshToken.device_id == device_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
