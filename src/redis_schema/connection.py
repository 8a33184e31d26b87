"""
Client construction for the Redis-backed root store.
"""

import asyncio
import logging
from typing import Optional

import redis.asyncio
from redis.exceptions import RedisError

from .config.shared import StoreSettings, get_store_settings
from .store import RedisStore

logger = logging.getLogger(__name__)

REDIS_SETUP_ERRORS = (
    RedisError,
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
    OSError,
)


def create_redis_client(settings: Optional[StoreSettings] = None) -> redis.asyncio.Redis:
    """
    Build an async Redis client from settings.

    Responses are decoded to ``str`` so stored JSON and counter values reach the
    store layer as text.
    """
    resolved = settings if settings is not None else get_store_settings()
    return redis.asyncio.from_url(resolved.url, decode_responses=True, **resolved.client_kwargs())


async def connect_store(settings: Optional[StoreSettings] = None) -> RedisStore:
    """
    Create a root store and ping Redis once so misconfiguration fails at startup.

    Raises:
        ConnectionError: If Redis cannot be reached
    """
    client = create_redis_client(settings)
    try:
        await client.ping()
    except REDIS_SETUP_ERRORS as exc:
        logger.exception("Failed to establish Redis connection (%s)", type(exc).__name__)
        await client.aclose()
        raise ConnectionError("Redis connection failed") from exc

    logger.info("Connected schema store to Redis")
    return RedisStore(client)


__all__ = ["REDIS_SETUP_ERRORS", "connect_store", "create_redis_client"]
