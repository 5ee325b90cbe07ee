"""Pytest configuration for async testing.

This configuration provides:
1. Marker registration (unit, integration)
2. Automatic asyncio marker for coroutine tests
3. Cache fixtures backed by fakeredis (in-memory Redis emulation)
4. Database fixtures backed by a throwaway SQLite file per test
"""

import inspect

import pytest
import pytest_asyncio

from src.infrastructure.cache.access_token_cache import RedisAccessTokenCache
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.persistence.database import Database

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-chars!"
ACCESS_TOKEN_TTL_SECONDS = 15 * 60


@pytest_asyncio.fixture
async def fakeredis_client():
    """Create fakeredis client for cache testing.

    Returns:
        fakeredis.aioredis.FakeRedis instance (in-memory Redis emulation)
    """
    import fakeredis.aioredis

    client = fakeredis.aioredis.FakeRedis(decode_responses=False)
    yield client
    await client.aclose()


@pytest.fixture
def cache_adapter(fakeredis_client):
    """Fresh RedisAdapter per test (bypasses container singleton)."""
    return RedisAdapter(redis_client=fakeredis_client)


@pytest.fixture
def access_token_cache(cache_adapter):
    """Access token cache over fakeredis with the default 15 minute TTL."""
    return RedisAccessTokenCache(
        redis_adapter=cache_adapter,
        cache_keys=CacheKeys(prefix="test"),
        ttl_seconds=ACCESS_TOKEN_TTL_SECONDS,
    )


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database with all tables created.

    Each test gets its own file, so no cleanup between tests is needed.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_all()
    yield database
    await database.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with fakeredis and SQLite"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
