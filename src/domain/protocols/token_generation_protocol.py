"""Token generation protocol for domain layer.

Defines how the auth flows obtain a signed token pair for a device session.
Infrastructure layer provides the implementation (JWTService).

Token Strategy:
    - Access tokens: short-lived JWT, also cached per (user, device)
    - Refresh tokens: longer-lived JWT, stored per (user, device)
"""

from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import TokenType, UserRole


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Signed token pair for one device session.

    Attributes:
        access_token: Short-lived JWT.
        refresh_token: Longer-lived JWT.
    """

    access_token: str
    refresh_token: str


class TokenGenerationProtocol(Protocol):
    """Token pair issuing and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 signed JWTs

    Usage:
        tokens = token_service.generate_auth_tokens(
            user_id=user.id,
            device_id="d1",
            role=user.role,
        )
    """

    def generate_auth_tokens(
        self,
        user_id: UUID,
        device_id: str,
        role: UserRole,
    ) -> AuthTokens:
        """Mint a new access/refresh token pair.

        Args:
            user_id: User's unique identifier ('sub' claim).
            device_id: Device the session belongs to.
            role: User role embedded in the tokens.

        Returns:
            AuthTokens. Every call yields tokens distinct from earlier ones.
        """
        ...

    def validate_token(
        self, token: str, token_type: TokenType
    ) -> Result[dict[str, Any], str]:
        """Validate a token and extract its payload.

        Args:
            token: Token string.
            token_type: Expected kind of token.

        Returns:
            Success(payload) or Failure(AuthenticationError constant).
        """
        ...
