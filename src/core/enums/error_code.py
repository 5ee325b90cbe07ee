"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS)
- Cache errors (CACHE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"

    # Cache errors
    CACHE_UNAVAILABLE = "cache_unavailable"
