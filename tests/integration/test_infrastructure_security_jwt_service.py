"""Integration tests for JWT token service.

Uses the real PyJWT library (no mocking).
Tests claims, uniqueness, type checking, expiry and tampering.
"""

from datetime import UTC, datetime

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.enums import TokenType, UserRole
from src.domain.errors import AuthenticationError
from src.infrastructure.security.jwt_service import JWTService

SECRET_KEY = "x" * 32


@pytest.mark.integration
class TestJWTServiceGeneration:
    """Token pair generation."""

    def test_generate_auth_tokens_returns_two_jwts(self):
        service = JWTService(secret_key=SECRET_KEY)

        tokens = service.generate_auth_tokens(
            user_id=uuid7(), device_id="d1", role=UserRole.NORMAL
        )

        assert len(tokens.access_token.split(".")) == 3
        assert len(tokens.refresh_token.split(".")) == 3
        assert tokens.access_token != tokens.refresh_token

    def test_tokens_carry_session_claims(self):
        # Arrange
        service = JWTService(secret_key=SECRET_KEY)
        user_id = uuid7()

        # Act
        tokens = service.generate_auth_tokens(
            user_id=user_id, device_id="d1", role=UserRole.ADMIN
        )
        result = service.validate_token(tokens.access_token, TokenType.ACCESS)

        # Assert
        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(user_id)
        assert payload["device_id"] == "d1"
        assert payload["role"] == "admin"
        assert payload["type"] == "access"
        assert "jti" in payload

    @freeze_time("2024-01-01 12:00:00")
    def test_pairs_issued_in_same_instant_differ(self):
        service = JWTService(secret_key=SECRET_KEY)
        user_id = uuid7()

        first = service.generate_auth_tokens(
            user_id=user_id, device_id="d1", role=UserRole.NORMAL
        )
        second = service.generate_auth_tokens(
            user_id=user_id, device_id="d1", role=UserRole.NORMAL
        )

        assert first.access_token != second.access_token
        assert first.refresh_token != second.refresh_token

    @freeze_time("2024-01-01 12:00:00")
    def test_lifetimes_follow_configuration(self):
        # Arrange
        service = JWTService(
            secret_key=SECRET_KEY, access_expire_minutes=15, refresh_expire_days=30
        )
        now = int(datetime(2024, 1, 1, 12, tzinfo=UTC).timestamp())

        # Act
        tokens = service.generate_auth_tokens(
            user_id=uuid7(), device_id="d1", role=UserRole.NORMAL
        )
        access = service.validate_token(tokens.access_token, TokenType.ACCESS)
        refresh = service.validate_token(tokens.refresh_token, TokenType.REFRESH)

        # Assert
        assert access.value["exp"] - now == 15 * 60
        assert refresh.value["exp"] - now == 30 * 24 * 60 * 60

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")


@pytest.mark.integration
class TestJWTServiceValidation:
    """Token validation failures."""

    def test_wrong_token_type_rejected(self):
        service = JWTService(secret_key=SECRET_KEY)
        tokens = service.generate_auth_tokens(
            user_id=uuid7(), device_id="d1", role=UserRole.NORMAL
        )

        result = service.validate_token(tokens.refresh_token, TokenType.ACCESS)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.WRONG_TOKEN_TYPE

    def test_expired_token_rejected(self):
        service = JWTService(secret_key=SECRET_KEY, access_expire_minutes=15)
        with freeze_time("2024-01-01 12:00:00"):
            tokens = service.generate_auth_tokens(
                user_id=uuid7(), device_id="d1", role=UserRole.NORMAL
            )

        with freeze_time("2024-01-01 12:16:00"):
            result = service.validate_token(tokens.access_token, TokenType.ACCESS)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.EXPIRED_TOKEN

    def test_token_signed_with_other_key_rejected(self):
        issuer = JWTService(secret_key="a" * 32)
        verifier = JWTService(secret_key="b" * 32)
        tokens = issuer.generate_auth_tokens(
            user_id=uuid7(), device_id="d1", role=UserRole.NORMAL
        )

        result = verifier.validate_token(tokens.access_token, TokenType.ACCESS)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.INVALID_TOKEN

    def test_garbage_token_rejected(self):
        service = JWTService(secret_key=SECRET_KEY)

        result = service.validate_token("not.a.jwt", TokenType.ACCESS)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.INVALID_TOKEN
