"""Refresh tokens handler.

Flow:
1. Re-fetch user by id (NotFound if missing)
2. Clear the device's current session (both stores, concurrently)
3. Issue a new token pair with the user's current role
4. Store the new session (both stores, concurrently)
5. Return Success(AuthTokens)

Both tokens always rotate. No user projection is returned.
"""

from src.application.commands.auth_commands import RefreshTokens
from src.application.errors import ApplicationError, ApplicationErrorCode, AuthError
from src.application.services import DeviceSessionWriter
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AuthTokens,
    LoggerProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshTokensHandler:
    """Handler for the RefreshTokens command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        session_writer: DeviceSessionWriter,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize refresh handler with dependencies.

        Args:
            user_repo: User repository for the existence/role lookup.
            token_service: Token pair issuer.
            session_writer: Clears and writes the device session.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._session_writer = session_writer
        self._logger = logger

    async def handle(self, cmd: RefreshTokens) -> Result[AuthTokens, ApplicationError]:
        """Handle refresh command.

        Args:
            cmd: RefreshTokens command.

        Returns:
            Success(AuthTokens) with the rotated pair.
            Failure(ApplicationError) with NOT_FOUND if the user no longer exists.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            self._logger.warning(
                "refresh_user_not_found",
                user_id=str(cmd.user_id),
                device_id=cmd.device_id,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=AuthError.USER_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=AuthError.USER_NOT_FOUND,
                        resource_type="User",
                        resource_id=str(cmd.user_id),
                    ),
                )
            )

        await self._session_writer.clear(user.id, cmd.device_id)
        tokens = self._token_service.generate_auth_tokens(
            user_id=user.id,
            device_id=cmd.device_id,
            role=user.role,
        )
        await self._session_writer.save(user.id, cmd.device_id, tokens)

        self._logger.info(
            "tokens_refreshed",
            user_id=str(user.id),
            device_id=cmd.device_id,
        )
        return Success(value=tokens)
