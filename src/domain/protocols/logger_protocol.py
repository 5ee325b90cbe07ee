"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Implementations MUST emit key-value context and
MUST NOT receive secrets.

Security:
    - NEVER log passwords, password hashes or tokens
    - Log identifiers (user_id, device_id) instead

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("user_signed_in", user_id=str(user_id), device_id=device_id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: snake_case event name (put variable data in context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: snake_case event name (put variable data in context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Example:
            flow_logger = logger.bind(handler="SignInHandler", device_id="d1")
            flow_logger.info("credentials_verified")
        """
        ...
