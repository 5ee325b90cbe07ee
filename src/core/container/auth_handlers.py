"""Authentication handler dependency factories.

Session-scoped handler instances for the device session lifecycle:
- Sign-up (normal and admin)
- Sign-in
- Logout
- Token refresh

Each factory takes the AsyncSession for the current unit of work and
combines it with the app-scoped singletons from infrastructure.py.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_access_token_cache,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_refresh_token_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.application.commands.handlers.refresh_tokens_handler import (
        RefreshTokensHandler,
    )
    from src.application.commands.handlers.sign_in_handler import SignInHandler
    from src.application.commands.handlers.sign_up_admin_handler import (
        SignUpAdminHandler,
    )
    from src.application.commands.handlers.sign_up_handler import SignUpHandler
    from src.application.services import DeviceSessionWriter


# ============================================================================
# Authentication Handler Factories
# ============================================================================


def get_device_session_writer(session: AsyncSession) -> "DeviceSessionWriter":
    """Get writer over the refresh token store and access token cache."""
    from src.application.services import DeviceSessionWriter

    return DeviceSessionWriter(
        refresh_token_repo=get_refresh_token_repository(session),
        access_token_cache=get_access_token_cache(),
    )


def get_sign_up_handler(session: AsyncSession) -> "SignUpHandler":
    """Get SignUp command handler.

    Dependencies:
    - UserRepository (session-scoped)
    - DeviceSessionWriter (session-scoped refresh store + app-scoped cache)
    - BcryptPasswordService, JWTService, logger (app-scoped singletons)

    Usage:
        async with get_database().get_session() as session:
            handler = get_sign_up_handler(session)
            result = await handler.handle(
                SignUp(email="a@x.com", password="p1", device_id="d1")
            )
    """
    from src.application.commands.handlers.sign_up_handler import SignUpHandler

    return SignUpHandler(
        user_repo=get_user_repository(session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        session_writer=get_device_session_writer(session),
        logger=get_logger(),
    )


def get_sign_up_admin_handler(session: AsyncSession) -> "SignUpAdminHandler":
    """Get admin SignUp command handler (same dependencies as sign-up)."""
    from src.application.commands.handlers.sign_up_admin_handler import (
        SignUpAdminHandler,
    )

    return SignUpAdminHandler(
        user_repo=get_user_repository(session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        session_writer=get_device_session_writer(session),
        logger=get_logger(),
    )


def get_sign_in_handler(session: AsyncSession) -> "SignInHandler":
    """Get SignIn command handler."""
    from src.application.commands.handlers.sign_in_handler import SignInHandler

    return SignInHandler(
        user_repo=get_user_repository(session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        session_writer=get_device_session_writer(session),
        logger=get_logger(),
    )


def get_logout_handler(session: AsyncSession) -> "LogoutHandler":
    """Get Logout command handler."""
    from src.application.commands.handlers.logout_handler import LogoutHandler

    return LogoutHandler(
        session_writer=get_device_session_writer(session),
        logger=get_logger(),
    )


def get_refresh_tokens_handler(session: AsyncSession) -> "RefreshTokensHandler":
    """Get RefreshTokens command handler."""
    from src.application.commands.handlers.refresh_tokens_handler import (
        RefreshTokensHandler,
    )

    return RefreshTokensHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_service(),
        session_writer=get_device_session_writer(session),
        logger=get_logger(),
    )
