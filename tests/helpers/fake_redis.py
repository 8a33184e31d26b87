"""In-memory stand-in for redis.asyncio.Redis."""

from __future__ import annotations

from typing import Any


class FakeRedis:
    """In-memory Redis mock covering the commands the root store issues."""

    def __init__(self, *, decode_responses: bool = True):
        self._data: dict[str, str] = {}
        self._hashes: dict[str, dict[str, str]] = {}
        self.expiries: dict[str, int] = {}
        self.decode_responses = decode_responses
        self.closed = False

    def _out(self, value: str | None) -> str | bytes | None:
        if value is None or self.decode_responses:
            return value
        return value.encode("utf-8")

    @staticmethod
    def _text(value: Any) -> str:
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def get(self, key: str) -> str | bytes | None:
        """Get a string value."""
        return self._out(self._data.get(key))

    async def set(self, key: str, value: Any, ex: int | None = None) -> bool:
        """Set a string value, recording the expiry if one was given."""
        self._data[key] = self._text(value)
        if ex is not None:
            self.expiries[key] = ex
        else:
            self.expiries.pop(key, None)
        return True

    async def delete(self, *keys: str) -> int:
        """Delete keys."""
        deleted = 0
        for k in keys:
            if k in self._data:
                del self._data[k]
                deleted += 1
            if k in self._hashes:
                del self._hashes[k]
                deleted += 1
            self.expiries.pop(k, None)
        return deleted

    async def incrby(self, key: str, amount: int = 1) -> int:
        """Increment a counter."""
        new_val = int(self._data.get(key, 0)) + amount
        self._data[key] = str(new_val)
        return new_val

    async def hget(self, key: str, field: str) -> str | bytes | None:
        """Get a hash field."""
        return self._out(self._hashes.get(key, {}).get(field))

    async def hset(
        self, key: str, field: str | None = None, value: Any = None, mapping: dict[str, Any] | None = None
    ) -> int:
        """Set hash fields with the redis-py ``hset(name, key, value, mapping)`` signature."""
        update_map: dict[str, Any] = dict(mapping or {})
        if field is not None:
            update_map[field] = value
        bucket = self._hashes.setdefault(key, {})
        added = sum(1 for f in update_map if f not in bucket)
        bucket.update({f: self._text(v) for f, v in update_map.items()})
        return added

    async def hdel(self, key: str, *fields: str) -> int:
        """Delete hash fields."""
        if key not in self._hashes:
            return 0
        deleted = sum(1 for f in fields if f in self._hashes[key])
        for f in fields:
            self._hashes[key].pop(f, None)
        if not self._hashes[key]:
            del self._hashes[key]
        return deleted

    async def hincrby(self, key: str, field: str, amount: int) -> int:
        """Increment a hash field."""
        bucket = self._hashes.setdefault(key, {})
        new_val = int(bucket.get(field, 0)) + amount
        bucket[field] = str(new_val)
        return new_val

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True

    def dump_hash(self, key: str) -> dict[str, str]:
        """Dump contents of a hash (test helper)."""
        return self._hashes.get(key, {}).copy()

    def dump_string(self, key: str) -> str | None:
        """Dump contents of a string (test helper)."""
        return self._data.get(key)

    def stored_keys(self) -> list[str]:
        """All keys currently holding data (test helper)."""
        return sorted({*self._data, *self._hashes})

