"""User roles.

Role is assigned once at sign-up and embedded in issued tokens:

    - normal: default role for self-registered users
    - admin: assigned only by the admin sign-up flow

Usage:
    from src.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so values serialize directly into JWT claims
        and database columns.
    """

    NORMAL = "normal"
    """Default role for users created by regular sign-up."""

    ADMIN = "admin"
    """Administrator role, created only through admin sign-up."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['normal', 'admin'].
        """
        return [role.value for role in cls]
