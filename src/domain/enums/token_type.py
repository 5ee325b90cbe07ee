"""Token types issued by the token service.

Carried in the ``type`` claim of every JWT so an access token can never be
accepted where a refresh token is expected (and vice versa).
"""

from enum import Enum


class TokenType(str, Enum):
    """Kinds of signed tokens."""

    ACCESS = "access"
    REFRESH = "refresh"
