"""Sign-up handler.

Flow:
1. Reject duplicate email (Conflict)
2. Hash password (bcrypt)
3. Persist user with the normal role
4. Issue token pair for (user, device)
5. Store refresh token and cache access token concurrently
6. Return Success(AuthUserResult)

A store failure in step 5 propagates as an exception. The user row from
step 3 stays in place without a session.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (stores are injected via protocols)
"""

from src.application.commands.auth_commands import SignUp
from src.application.dtos import AuthUserResult, UserResponse
from src.application.errors import ApplicationError, ApplicationErrorCode, AuthError
from src.application.services import DeviceSessionWriter
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class SignUpHandler:
    """Handler for the SignUp command (normal role)."""

    role: UserRole = UserRole.NORMAL

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        session_writer: DeviceSessionWriter,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize sign-up handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing/verification service.
            token_service: Token pair issuer.
            session_writer: Writes the device session to both stores.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._session_writer = session_writer
        self._logger = logger

    async def handle(self, cmd: SignUp) -> Result[AuthUserResult, ApplicationError]:
        """Handle sign-up command.

        Args:
            cmd: SignUp command.

        Returns:
            Success(AuthUserResult) with the new user and tokens.
            Failure(ApplicationError) with CONFLICT if the email is taken.

        Raises:
            Any exception raised by the user repository or session stores.
        """
        result = await self._create_user(cmd)
        if isinstance(result, Failure):
            return result

        return Success(value=await self._open_session(result.value, cmd.device_id))

    async def _create_user(self, cmd: SignUp) -> Result[User, ApplicationError]:
        """Check email uniqueness, hash the password and persist the user."""
        if await self._user_repo.exists_by_email(cmd.email):
            self._logger.info("sign_up_email_conflict", device_id=cmd.device_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message=AuthError.EMAIL_ALREADY_REGISTERED,
                    domain_error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message=AuthError.EMAIL_ALREADY_REGISTERED,
                        resource_type="User",
                        conflicting_field="email",
                    ),
                )
            )

        user = User.register(
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
            name=cmd.name,
            role=self.role,
        )
        await self._user_repo.save(user)
        self._logger.info(
            "user_created",
            user_id=str(user.id),
            role=user.role.value,
        )
        return Success(value=user)

    async def _open_session(self, user: User, device_id: str) -> AuthUserResult:
        """Issue tokens for a freshly created user and store them."""
        tokens = self._token_service.generate_auth_tokens(
            user_id=user.id,
            device_id=device_id,
            role=user.role,
        )
        await self._session_writer.save(user.id, device_id, tokens)
        self._logger.info(
            "device_session_opened",
            user_id=str(user.id),
            device_id=device_id,
        )
        return AuthUserResult(user=UserResponse.from_entity(user), tokens=tokens)
