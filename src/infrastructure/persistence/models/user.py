"""User database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email: stored lowercase, unique
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        role: "normal" or "admin"
        name: Optional display name

    Relationships:
        - refresh_tokens: One-to-many (cascade delete at the database level)
    """

    __tablename__ = "users"

    # Email address (unique, indexed for sign-in queries)
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password (cost factor 10)",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="normal",
        comment="User role (normal, admin)",
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Optional display name",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r}, role={self.role!r})>"
