"""
Settings for the auth service, read from the environment (and an optional
.env file) by pydantic-settings. Database URL, Redis URL and the JWT
secret have no defaults and must be provided.

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    ttl = settings.access_token_ttl_seconds
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Values from the optional .env file
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects the log renderer",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level name",
    )

    # Database configuration
    database_url: str = Field(
        description="SQLAlchemy async URL (postgresql+asyncpg or sqlite+aiosqlite)",
    )
    db_echo: bool = Field(
        default=False,
        description="Echo SQL statements to the log",
    )

    # Cache configuration (Redis)
    redis_url: str = Field(
        description="Redis URL for the access token cache",
    )
    cache_key_prefix: str = Field(
        default="auth",
        description="Prefix for every cache key written by this service",
    )

    # Security configuration
    secret_key: str = Field(
        description="Secret key for JWT token signing (at least 32 characters)",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        description="Access token lifetime in minutes (also the cache entry TTL)",
    )
    refresh_token_expire_days: int = Field(
        default=30,
        description="Refresh token lifetime in days",
    )
    bcrypt_rounds: int = Field(
        default=10,
        description="Bcrypt cost factor for password hashing",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range the hasher accepts.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """
        Require a 256-bit signing secret.

        Raises:
            ValueError: If the secret is shorter than 32 characters.
        """
        if len(v) < 32:
            raise ValueError("secret_key must be at least 32 characters")
        return v

    @property
    def access_token_ttl_seconds(self) -> int:
        """Access token lifetime in seconds."""
        return self.access_token_expire_minutes * 60

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING or CI."""
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
