"""Declarative bases shared by the auth tables.

- BaseModel: id + created_at, for rows that are only inserted and deleted
- BaseMutableModel: adds updated_at, for rows that change in place

    BaseModel
      ├── RefreshToken   (rotation replaces the row)
      └── BaseMutableModel
            └── User

Models are infrastructure only. Repositories map them to and from the
domain dataclasses. The generic Uuid type keeps them portable between
PostgreSQL and SQLite.
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Root declarative base: UUID primary key and insert timestamp."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Base for tables whose rows are updated after insert."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
