"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis)
- Access token cache (Redis, per device session)
- Database (PostgreSQL / SQLite)
- Password hashing (bcrypt)
- Token generation (JWT)
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.access_token_cache_protocol import (
        AccessTokenCacheProtocol,
    )
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns a RedisAdapter over one connection pool shared by the process.

    Usage:
        cache = get_cache()
        await cache.set("key", "value")
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache.redis_adapter import RedisAdapter

    pool = ConnectionPool.from_url(
        get_settings().redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    redis_client = Redis(connection_pool=pool)
    return RedisAdapter(redis_client=redis_client)


@lru_cache()
def get_access_token_cache() -> "AccessTokenCacheProtocol":
    """Get access token cache singleton (app-scoped).

    Entries live as long as the access token itself.
    """
    from src.infrastructure.cache.access_token_cache import RedisAccessTokenCache
    from src.infrastructure.cache.cache_keys import CacheKeys

    settings = get_settings()
    return RedisAccessTokenCache(
        redis_adapter=get_cache(),
        cache_keys=CacheKeys(prefix=settings.cache_key_prefix),
        ttl_seconds=settings.access_token_ttl_seconds,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Usage:
        async with get_database().get_session() as session:
            handler = get_sign_in_handler(session)
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.
    """
    from src.infrastructure.security.bcrypt_password_service import (
        BcryptPasswordService,
    )

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get token generation service singleton (app-scoped).

    Returns JWTService configured with secret key and token lifetimes.
    """
    from src.infrastructure.security.jwt_service import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        access_expire_minutes=settings.access_token_expire_minutes,
        refresh_expire_days=settings.refresh_token_expire_days,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
