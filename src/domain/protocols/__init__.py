"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    # Import service protocols
    from src.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol

    # Import store protocols
    from src.domain.protocols import UserRepository, RefreshTokenRepository
"""

# Service protocols
from src.domain.protocols.access_token_cache_protocol import AccessTokenCacheProtocol
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import (
    AuthTokens,
    TokenGenerationProtocol,
)

# Repository protocols
from src.domain.protocols.refresh_token_repository import RefreshTokenRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AccessTokenCacheProtocol",
    "AuthTokens",
    "CacheProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "RefreshTokenRepository",
    "UserRepository",
]
