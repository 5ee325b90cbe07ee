"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - user.py: User model
    - refresh_token.py: Per-device refresh token model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "RefreshToken",
    "User",
]
