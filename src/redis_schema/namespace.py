from __future__ import annotations

"""Prefix-composing store decorator."""


from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    import redis.asyncio

    from .store import Store


class StoreNamespace:
    """
    Store view that prepends ``prefix`` to every key it forwards.

    No separator is added, so ``"app:"`` and ``"app"`` give different keys.
    Namespaces nest: ``ns.namespaced_by("a:").namespaced_by("b:")`` resolves keys
    exactly like a single ``"a:b:"`` namespace on ``ns``. Key registration is
    forwarded the same way, so every branch of the tree shares the root's
    registry.
    """

    def __init__(self, store: "Store", prefix: str) -> None:
        self._store = store
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return self._prefix + key

    def get_raw_connection(self) -> "redis.asyncio.Redis":
        return self._store.get_raw_connection()

    def get_prefix(self) -> str:
        """This namespace's own segment, not the path from the root."""
        return self._prefix

    def get_full_prefix(self) -> str:
        return self._store.get_full_prefix() + self._prefix

    def namespaced_by(self, prefix: str) -> "StoreNamespace":
        return StoreNamespace(self, prefix)

    def mark_key_as_used(self, key: str) -> None:
        self._store.mark_key_as_used(self._key(key))

    def is_used(self, key: str) -> bool:
        return self._store.is_used(self._key(key))

    async def get(self, key: str) -> Any:
        return await self._store.get(self._key(key))

    async def set(self, key: str, value: Any, expiry_seconds: Optional[int] = None) -> bool:
        return await self._store.set(self._key(key), value, expiry_seconds)

    async def delete(self, key: str) -> None:
        await self._store.delete(self._key(key))

    async def incrby(self, key: str, amount: int) -> int:
        return await self._store.incrby(self._key(key), amount)

    async def hget(self, key: str, field: str) -> Optional[str]:
        return await self._store.hget(self._key(key), field)

    async def hset(self, key: str, field: str, value: str) -> None:
        await self._store.hset(self._key(key), field, value)

    async def hdel(self, key: str, field: str) -> None:
        await self._store.hdel(self._key(key), field)

    async def hincrby(self, key: str, field: str, amount: int) -> int:
        return await self._store.hincrby(self._key(key), field, amount)

    def __repr__(self) -> str:
        return f"StoreNamespace(prefix={self.get_full_prefix()!r})"


__all__ = ["StoreNamespace"]
