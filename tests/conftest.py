"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from redis_schema.store import RedisStore
from tests.helpers.fake_redis import FakeRedis


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Provide a fake Redis instance."""
    return FakeRedis()


@pytest.fixture
def store(fake_redis: FakeRedis) -> RedisStore:
    """Root store over the fake Redis instance."""
    return RedisStore(fake_redis)  # type: ignore[arg-type]


@pytest.fixture
def ns(store: RedisStore):
    """The namespace most tests declare their schema objects in."""
    return store.namespaced_by("redis-schema:test:")
