"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command handlers.

Usage:
    from src.application.dtos import AuthUserResult, UserResponse
"""

from src.application.dtos.auth_dtos import AuthUserResult, UserResponse

__all__ = [
    "AuthUserResult",
    "UserResponse",
]
