"""Refresh token database model.

One row per device session: the current refresh token for a
(user_id, device_id) pair. Rotation deletes the row and inserts a new one.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class RefreshToken(BaseModel):
    """Refresh token model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when token was stored (from BaseModel)
        user_id: Foreign key to users table (cascade delete)
        device_id: Client-supplied device identifier
        token: Signed refresh token

    Constraints:
        - uq_refresh_tokens_user_device: at most one row per (user_id, device_id)

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )

    device_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Device the session belongs to",
    )

    token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Current refresh token for the device session",
    )

    __table_args__ = (
        UniqueConstraint(
            "user_id", "device_id", name="uq_refresh_tokens_user_device"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"device_id={self.device_id!r}"
            f")>"
        )
