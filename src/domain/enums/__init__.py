"""Domain enums.

Available Enums:
    - UserRole: user roles (normal, admin)
    - TokenType: signed token kinds (access, refresh)
"""

from src.domain.enums.token_type import TokenType
from src.domain.enums.user_role import UserRole

__all__ = ["TokenType", "UserRole"]
