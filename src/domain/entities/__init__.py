"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.user import User, UserCredentials

__all__ = [
    "User",
    "UserCredentials",
]
