"""Sign-in handler.

Flow:
1. Load credentials (id + password hash) by email
2. Verify password
3. Re-fetch the full user by id
4. Issue a new token pair
5. Clear the device's previous session (both stores, concurrently)
6. Store the new session (both stores, concurrently)
7. Return Success(AuthUserResult)

Unknown email and wrong password return the same Unauthorized error and
leave existing session state untouched. Sign-in on a device with a live
session replaces it.
"""

from src.application.commands.auth_commands import SignIn
from src.application.dtos import AuthUserResult, UserResponse
from src.application.errors import ApplicationError, ApplicationErrorCode, AuthError
from src.application.services import DeviceSessionWriter
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class SignInHandler:
    """Handler for the SignIn command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        session_writer: DeviceSessionWriter,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize sign-in handler with dependencies.

        Args:
            user_repo: User repository for lookups.
            password_service: Password verification service.
            token_service: Token pair issuer.
            session_writer: Clears and writes the device session.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._session_writer = session_writer
        self._logger = logger

    async def handle(self, cmd: SignIn) -> Result[AuthUserResult, ApplicationError]:
        """Handle sign-in command.

        Args:
            cmd: SignIn command.

        Returns:
            Success(AuthUserResult) with the user and new tokens.
            Failure(ApplicationError) with UNAUTHORIZED on bad credentials,
            or NOT_FOUND if the user vanished between the two lookups.
        """
        credentials = await self._user_repo.find_credentials_by_email(cmd.email)
        if credentials is None or not self._password_service.verify_password(
            cmd.password, credentials.password_hash
        ):
            self._logger.info("sign_in_rejected", device_id=cmd.device_id)
            return Failure(error=self._invalid_credentials())

        user = await self._user_repo.find_by_id(credentials.id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=AuthError.USER_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=AuthError.USER_NOT_FOUND,
                        resource_type="User",
                        resource_id=str(credentials.id),
                    ),
                )
            )

        tokens = self._token_service.generate_auth_tokens(
            user_id=user.id,
            device_id=cmd.device_id,
            role=user.role,
        )

        # Delete phase must finish before the write phase starts
        await self._session_writer.clear(user.id, cmd.device_id)
        await self._session_writer.save(user.id, cmd.device_id, tokens)

        self._logger.info(
            "user_signed_in",
            user_id=str(user.id),
            device_id=cmd.device_id,
        )
        return Success(
            value=AuthUserResult(user=UserResponse.from_entity(user), tokens=tokens)
        )

    @staticmethod
    def _invalid_credentials() -> ApplicationError:
        return ApplicationError(
            code=ApplicationErrorCode.UNAUTHORIZED,
            message=AuthError.INVALID_CREDENTIALS,
            domain_error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message=AuthError.INVALID_CREDENTIALS,
            ),
        )
