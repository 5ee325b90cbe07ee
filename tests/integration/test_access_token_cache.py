"""Integration tests for the Redis access token cache.

Runs RedisAccessTokenCache against fakeredis and checks the key layout,
TTL handling, idempotent removal and error propagation.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from uuid_extensions import uuid7

from src.infrastructure.cache.access_token_cache import RedisAccessTokenCache
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import AccessTokenCacheError

from tests.conftest import ACCESS_TOKEN_TTL_SECONDS


@pytest.mark.integration
class TestRedisAccessTokenCache:
    """Access token cache against fakeredis."""

    async def test_save_token_uses_device_session_key(
        self, access_token_cache, fakeredis_client
    ):
        user_id = uuid7()

        await access_token_cache.save_token(user_id, "d1", "access-1")

        raw = await fakeredis_client.get(f"test:auth:access:{user_id}:d1")
        assert raw == b"access-1"

    async def test_save_token_sets_ttl(self, access_token_cache, fakeredis_client):
        user_id = uuid7()

        await access_token_cache.save_token(user_id, "d1", "access-1")

        ttl = await fakeredis_client.ttl(f"test:auth:access:{user_id}:d1")
        assert 0 < ttl <= ACCESS_TOKEN_TTL_SECONDS

    async def test_save_token_overwrites_existing_entry(self, access_token_cache):
        user_id = uuid7()

        await access_token_cache.save_token(user_id, "d1", "access-1")
        await access_token_cache.save_token(user_id, "d1", "access-2")

        assert await access_token_cache.get_token(user_id, "d1") == "access-2"

    async def test_devices_are_isolated(self, access_token_cache):
        user_id = uuid7()

        await access_token_cache.save_token(user_id, "d1", "access-1")
        await access_token_cache.save_token(user_id, "d2", "access-2")
        await access_token_cache.remove_token(user_id, "d1")

        assert await access_token_cache.get_token(user_id, "d1") is None
        assert await access_token_cache.get_token(user_id, "d2") == "access-2"

    async def test_remove_token_is_idempotent(self, access_token_cache):
        user_id = uuid7()
        await access_token_cache.save_token(user_id, "d1", "access-1")

        await access_token_cache.remove_token(user_id, "d1")
        await access_token_cache.remove_token(user_id, "d1")

        assert await access_token_cache.get_token(user_id, "d1") is None

    async def test_get_token_miss_returns_none(self, access_token_cache):
        assert await access_token_cache.get_token(uuid7(), "d1") is None


@pytest.mark.integration
class TestRedisAccessTokenCacheErrors:
    """Redis failures are raised, never swallowed."""

    @pytest.fixture
    def failing_cache(self):
        client = AsyncMock()
        for name in ("get", "setex", "delete"):
            getattr(client, name).side_effect = RedisConnectionError("refused")
        return RedisAccessTokenCache(
            redis_adapter=RedisAdapter(redis_client=client),
            cache_keys=CacheKeys(prefix="test"),
            ttl_seconds=ACCESS_TOKEN_TTL_SECONDS,
        )

    async def test_save_failure_raises(self, failing_cache):
        with pytest.raises(AccessTokenCacheError) as exc_info:
            await failing_cache.save_token(uuid7(), "d1", "access-1")

        assert (
            exc_info.value.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_SET_ERROR
        )

    async def test_remove_failure_raises(self, failing_cache):
        with pytest.raises(AccessTokenCacheError) as exc_info:
            await failing_cache.remove_token(uuid7(), "d1")

        assert (
            exc_info.value.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_DELETE_ERROR
        )

    async def test_get_failure_raises(self, failing_cache):
        with pytest.raises(AccessTokenCacheError):
            await failing_cache.get_token(uuid7(), "d1")
