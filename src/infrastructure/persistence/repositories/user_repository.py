"""SQLAlchemy adapter for the UserRepository port.

Emails are written lowercase and every lookup lowercases its argument, so
matching is case-insensitive while `_` and `%` stay literal characters.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User, UserCredentials
from src.domain.enums import UserRole
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """User persistence over an AsyncSession.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     credentials = await repo.find_credentials_by_email("a@x.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Load the full user, or None."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return self._to_domain_or_none(result.scalar_one_or_none())

    async def find_by_email(self, email: str) -> User | None:
        """Load the full user for an email, or None."""
        stmt = select(UserModel).where(UserModel.email == email.lower())
        result = await self.session.execute(stmt)
        return self._to_domain_or_none(result.scalar_one_or_none())

    async def find_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Select only id and password_hash for an email.

        Sign-in verifies against this projection and re-fetches the full
        user by id afterwards.
        """
        stmt = select(UserModel.id, UserModel.password_hash).where(
            UserModel.email == email.lower()
        )
        row = (await self.session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return UserCredentials(id=row.id, password_hash=row.password_hash)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> None:
        """Insert and commit a new user.

        Raises:
            IntegrityError: If another row already holds the email.
        """
        user_model = UserModel(
            id=user.id,
            email=user.email.lower(),
            password_hash=user.password_hash,
            role=user.role.value,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(user_model)
        await self.session.commit()

    @staticmethod
    def _to_domain_or_none(user_model: UserModel | None) -> User | None:
        if user_model is None:
            return None
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            role=UserRole(user_model.role),
            name=user_model.name,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
