"""Integration tests for UserRepository.

Runs the SQLAlchemy repository against a throwaway SQLite database.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.domain.entities.user import User, UserCredentials
from src.domain.enums import UserRole
from src.infrastructure.persistence.repositories import UserRepository


def create_user(email: str = "a@x.com", role: UserRole = UserRole.NORMAL) -> User:
    return User.register(
        email=email,
        password_hash="$2b$10$abcdefghijklmnopqrstuuKzvNwXbqV3h8YQ0WvHk1jK7nY2yq1a",
        name="Alice",
        role=role,
    )


@pytest.mark.integration
class TestUserRepositorySave:
    """User creation."""

    async def test_save_and_find_by_id(self, test_database):
        user = create_user()

        async with test_database.get_session() as session:
            await UserRepository(session).save(user)

        async with test_database.get_session() as session:
            found = await UserRepository(session).find_by_id(user.id)

        assert found is not None
        assert found.id == user.id
        assert found.email == "a@x.com"
        assert found.name == "Alice"
        assert found.role == UserRole.NORMAL

    async def test_admin_role_round_trips(self, test_database):
        user = create_user(role=UserRole.ADMIN)

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(user)
            found = await repo.find_by_id(user.id)

        assert found.is_admin

    async def test_email_is_stored_lowercase(self, test_database):
        user = create_user(email="Alice@Example.COM")

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(user)
            found = await repo.find_by_email("alice@example.com")

        assert found is not None
        assert found.email == "alice@example.com"

    async def test_duplicate_email_raises_integrity_error(self, test_database):
        async with test_database.get_session() as session:
            await UserRepository(session).save(create_user())

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                await UserRepository(session).save(create_user(email="A@X.com"))


@pytest.mark.integration
class TestUserRepositoryLookups:
    """Lookups by id and email."""

    async def test_find_by_id_missing_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await UserRepository(session).find_by_id(uuid7()) is None

    async def test_find_by_email_is_case_insensitive(self, test_database):
        user = create_user()

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(user)
            found = await repo.find_by_email("A@X.COM")

        assert found is not None
        assert found.id == user.id

    async def test_find_credentials_returns_projection(self, test_database):
        user = create_user()

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(user)
            credentials = await repo.find_credentials_by_email("a@x.com")

        assert credentials == UserCredentials(
            id=user.id, password_hash=user.password_hash
        )

    async def test_find_credentials_missing_returns_none(self, test_database):
        async with test_database.get_session() as session:
            repo = UserRepository(session)
            assert await repo.find_credentials_by_email("nobody@x.com") is None

    async def test_email_underscore_is_not_a_wildcard(self, test_database):
        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(create_user(email="ab@x.com"))

            assert await repo.exists_by_email("a_@x.com") is False
            assert await repo.exists_by_email("AB@x.com") is True
