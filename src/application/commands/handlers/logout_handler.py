"""Logout handler.

Deletes the device's refresh token and cached access token concurrently.
Idempotent: logging out a device with no session succeeds.
"""

from src.application.commands.auth_commands import Logout
from src.application.errors import ApplicationError
from src.application.services import DeviceSessionWriter
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol


class LogoutHandler:
    """Handler for the Logout command."""

    def __init__(
        self,
        session_writer: DeviceSessionWriter,
        logger: LoggerProtocol,
    ) -> None:
        self._session_writer = session_writer
        self._logger = logger

    async def handle(self, cmd: Logout) -> Result[None, ApplicationError]:
        """Handle logout command.

        Returns:
            Success(None). Store failures are raised, not returned.
        """
        await self._session_writer.clear(cmd.user_id, cmd.device_id)
        self._logger.info(
            "user_logged_out",
            user_id=str(cmd.user_id),
            device_id=cmd.device_id,
        )
        return Success(value=None)
