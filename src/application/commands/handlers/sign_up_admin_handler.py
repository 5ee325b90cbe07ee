"""Admin sign-up handler.

Same flow as SignUpHandler with two differences:
- The user is created with the admin role.
- After the user row is persisted, the plaintext password is verified
  against the stored hash. A mismatch returns Unauthorized and no session
  is opened; the user row is not removed.
"""

from src.application.commands.auth_commands import SignUp
from src.application.commands.handlers.sign_up_handler import SignUpHandler
from src.application.dtos import AuthUserResult
from src.application.errors import ApplicationError, ApplicationErrorCode, AuthError
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.enums import UserRole


class SignUpAdminHandler(SignUpHandler):
    """Handler for the SignUp command (admin role)."""

    role: UserRole = UserRole.ADMIN

    async def handle(self, cmd: SignUp) -> Result[AuthUserResult, ApplicationError]:
        """Handle admin sign-up command.

        Returns:
            Success(AuthUserResult) with the new admin and tokens.
            Failure(ApplicationError) with CONFLICT if the email is taken,
            or UNAUTHORIZED if the stored hash does not verify.
        """
        result = await self._create_user(cmd)
        if isinstance(result, Failure):
            return result
        user = result.value

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            self._logger.error(
                "admin_password_self_check_failed",
                user_id=str(user.id),
                device_id=cmd.device_id,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message=AuthError.INVALID_CREDENTIALS,
                    domain_error=AuthenticationError(
                        code=ErrorCode.INVALID_CREDENTIALS,
                        message=AuthError.INVALID_CREDENTIALS,
                    ),
                )
            )

        return Success(value=await self._open_session(user, cmd.device_id))
