from __future__ import annotations

"""
Store capability and its Redis-backed root implementation.

Every store, root or namespace, exposes the same interface. Namespaces rewrite
keys and forward; the root talks to Redis and owns the schema registry.
"""


import logging
from typing import TYPE_CHECKING, Any, Optional, Protocol, Union

import redis.asyncio

from .converters import decode_json_payload, decode_redis_value, encode_json_payload
from .registry import SchemaRegistry
from .typing import ensure_awaitable

if TYPE_CHECKING:
    from .namespace import StoreNamespace

logger = logging.getLogger(__name__)


class Store(Protocol):
    """Key/value, hash and counter primitives plus key registration."""

    async def get(self, key: str) -> Any:
        """Return the decoded value at ``key`` or ``None`` when absent."""
        ...

    async def set(self, key: str, value: Any, expiry_seconds: Optional[int] = None) -> bool:
        """Store ``value`` at ``key``, optionally expiring after ``expiry_seconds``."""
        ...

    async def delete(self, key: str) -> None: ...

    async def incrby(self, key: str, amount: int) -> int:
        """Atomically add ``amount``; a missing key starts from zero."""
        ...

    async def hget(self, key: str, field: str) -> Optional[str]: ...

    async def hset(self, key: str, field: str, value: str) -> None: ...

    async def hdel(self, key: str, field: str) -> None: ...

    async def hincrby(self, key: str, field: str, amount: int) -> int:
        """Atomically add ``amount`` to a hash field; a missing field starts from zero."""
        ...

    def get_raw_connection(self) -> redis.asyncio.Redis: ...

    def namespaced_by(self, prefix: str) -> "StoreNamespace": ...

    def get_prefix(self) -> str: ...

    def get_full_prefix(self) -> str: ...

    def mark_key_as_used(self, key: str) -> None: ...

    def is_used(self, key: str) -> bool: ...


class RedisStore:
    """
    Root store backed by an async Redis client.

    Values passed to ``set`` are stored as JSON and decoded again by ``get``.
    Hash fields and counters are stored as the plain strings Redis keeps for them.
    """

    def __init__(self, client_or_url: Union[redis.asyncio.Redis, str]) -> None:
        if isinstance(client_or_url, str):
            self._client = redis.asyncio.from_url(client_or_url, decode_responses=True)
        else:
            self._client = client_or_url
        self._registry = SchemaRegistry()

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    async def close(self) -> None:
        """Close the underlying client; derived namespaces become unusable."""
        await self._client.aclose()
        logger.info("RedisStore closed connection")

    def mark_key_as_used(self, key: str) -> None:
        self._registry.mark_key_as_used(key)

    def is_used(self, key: str) -> bool:
        return self._registry.is_used(key)

    def get_raw_connection(self) -> redis.asyncio.Redis:
        return self._client

    def get_prefix(self) -> str:
        return ""

    def get_full_prefix(self) -> str:
        return ""

    def namespaced_by(self, prefix: str) -> "StoreNamespace":
        from .namespace import StoreNamespace

        return StoreNamespace(self, prefix)

    async def get(self, key: str) -> Any:
        raw = await ensure_awaitable(self._client.get(key))
        return decode_json_payload(raw)

    async def set(self, key: str, value: Any, expiry_seconds: Optional[int] = None) -> bool:
        payload = encode_json_payload(value)
        result = await ensure_awaitable(self._client.set(key, payload, ex=expiry_seconds))
        return bool(result)

    async def delete(self, key: str) -> None:
        await ensure_awaitable(self._client.delete(key))

    async def incrby(self, key: str, amount: int) -> int:
        value = await ensure_awaitable(self._client.incrby(key, amount))
        return int(value)

    async def hget(self, key: str, field: str) -> Optional[str]:
        value = await ensure_awaitable(self._client.hget(key, field))
        return decode_redis_value(value)

    async def hset(self, key: str, field: str, value: str) -> None:
        await ensure_awaitable(self._client.hset(key, field, value))

    async def hdel(self, key: str, field: str) -> None:
        await ensure_awaitable(self._client.hdel(key, field))

    async def hincrby(self, key: str, field: str, amount: int) -> int:
        value = await ensure_awaitable(self._client.hincrby(key, field, amount))
        return int(value)


__all__ = ["RedisStore", "Store"]
