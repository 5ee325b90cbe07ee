"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Token layout:
    - Access token: short-lived, `type` claim "access"
    - Refresh token: longer-lived, `type` claim "refresh"
    - Both carry sub (user id), device_id, role, iat, exp and a unique jti,
      so two pairs issued in the same second still differ.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID
from uuid_extensions import uuid7

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType, UserRole
from src.domain.errors import AuthenticationError
from src.domain.protocols import AuthTokens


class JWTService:
    """JWT token pair generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        tokens = token_service.generate_auth_tokens(
            user_id=user.id,
            device_id="d1",
            role=user.role,
        )
        result = token_service.validate_token(tokens.access_token, TokenType.ACCESS)
    """

    def __init__(
        self,
        secret_key: str,
        access_expire_minutes: int = 15,
        refresh_expire_days: int = 30,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            access_expire_minutes: Access token lifetime in minutes.
            refresh_expire_days: Refresh token lifetime in days.
            algorithm: JWT signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_lifetime = timedelta(minutes=access_expire_minutes)
        self._refresh_lifetime = timedelta(days=refresh_expire_days)
        self._algorithm = algorithm

    def generate_auth_tokens(
        self,
        user_id: UUID,
        device_id: str,
        role: UserRole,
    ) -> AuthTokens:
        """Generate a signed access/refresh token pair.

        Args:
            user_id: User's unique identifier.
            device_id: Device the session belongs to.
            role: User role claim.

        Returns:
            AuthTokens with both JWTs.
        """
        now = datetime.now(UTC)
        return AuthTokens(
            access_token=self._encode(
                user_id, device_id, role, TokenType.ACCESS, now, self._access_lifetime
            ),
            refresh_token=self._encode(
                user_id, device_id, role, TokenType.REFRESH, now, self._refresh_lifetime
            ),
        )

    def validate_token(
        self, token: str, token_type: TokenType
    ) -> Result[dict[str, Any], str]:
        """Validate a JWT and extract its payload.

        Args:
            token: JWT string to validate.
            token_type: Expected `type` claim.

        Returns:
            Success(payload) if signature, expiry and type check out.
            Failure(AuthenticationError.*) otherwise.

        Example:
            >>> result = service.validate_token(tokens.refresh_token, TokenType.ACCESS)
            >>> result.error
            'Wrong token type'
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm]
            )
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        if payload.get("type") != token_type.value:
            return Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)

        return Success(value=payload)

    def _encode(
        self,
        user_id: UUID,
        device_id: str,
        role: UserRole,
        token_type: TokenType,
        issued_at: datetime,
        lifetime: timedelta,
    ) -> str:
        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "device_id": device_id,
            "role": role.value,
            "type": token_type.value,
            "iat": int(issued_at.timestamp()),  # Issued at
            "exp": int((issued_at + lifetime).timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token
