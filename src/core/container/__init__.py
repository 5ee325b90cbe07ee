"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_cache, get_sign_in_handler, ...

The container is organized into modules:
- infrastructure: App-scoped services (cache, db, logging, security)
- repositories: Session-scoped repository factories
- auth_handlers: Session-scoped authentication handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_access_token_cache,
    get_cache,
    get_database,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_refresh_token_repository,
    get_user_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_device_session_writer,
    get_logout_handler,
    get_refresh_tokens_handler,
    get_sign_in_handler,
    get_sign_up_admin_handler,
    get_sign_up_handler,
)

__all__ = [
    # Infrastructure
    "get_access_token_cache",
    "get_cache",
    "get_database",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_refresh_token_repository",
    "get_user_repository",
    # Auth handlers
    "get_device_session_writer",
    "get_logout_handler",
    "get_refresh_tokens_handler",
    "get_sign_in_handler",
    "get_sign_up_admin_handler",
    "get_sign_up_handler",
]
