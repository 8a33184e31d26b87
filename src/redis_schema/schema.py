from __future__ import annotations

"""
Typed schema declarations over a store or namespace.

Constructing a schema object claims its key in the root store's registry, so a
second declaration resolving to the same fully-qualified key fails with
``DuplicateSchemaKeyError`` before any Redis I/O happens. Each object exposes
only the operations that make sense for its shape.
"""


import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .codecs import Codec
from .converters import decode_json_payload, encode_json_payload
from .exceptions import DataError, ValidationError
from .store import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _coerce_counter(value: Any) -> int:
    """Read a stored counter, treating missing or non-numeric values as 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


@dataclass(frozen=True)
class _SchemaKey:
    store: Store
    key: str

    def __post_init__(self) -> None:
        self.store.mark_key_as_used(self.key)

    @property
    def full_key(self) -> str:
        return self.store.get_full_prefix() + self.key


@dataclass(frozen=True)
class Obj(_SchemaKey, Generic[T]):
    """A single typed value stored at one key."""

    codec: Codec[T]

    async def get(self) -> T:
        """
        Read and validate the value.

        An absent key hands ``None`` to the codec, which decides whether that is
        acceptable.

        Raises:
            ValidationError: If the stored text is not JSON or does not match the codec
        """
        try:
            raw = await self.store.get(self.key)
        except DataError as exc:
            raise ValidationError(f"Value at {self.full_key!r} is not valid JSON") from exc
        return self.codec.read(raw)

    async def set(self, value: T, expiry_seconds: Optional[int] = None) -> bool:
        return await self.store.set(self.key, self.codec.write(value), expiry_seconds)

    async def delete(self) -> None:
        """Remove the value. The key stays registered."""
        await self.store.delete(self.key)


@dataclass(frozen=True)
class HashOf(_SchemaKey, Generic[T]):
    """A hash whose fields each hold one typed value."""

    codec: Codec[T]

    async def hget(self, field: str) -> T:
        """
        Read and validate one field.

        Only a missing field reaches the codec as ``None``; a field holding
        empty or non-JSON text raises ``ValidationError``.
        """
        raw = await self.store.hget(self.key, field)
        try:
            payload = decode_json_payload(raw)
        except DataError as exc:
            raise ValidationError(
                f"Hash field {field!r} of {self.full_key!r} is not valid JSON", field=field
            ) from exc
        return self.codec.read(payload)

    async def hset(self, field: str, value: T) -> None:
        await self.store.hset(self.key, field, encode_json_payload(self.codec.write(value)))

    async def hdel(self, field: str) -> None:
        await self.store.hdel(self.key, field)

    async def delete(self) -> None:
        await self.store.delete(self.key)


@dataclass(frozen=True)
class Counter(_SchemaKey):
    """An integer counter with atomic increments."""

    async def get(self) -> int:
        try:
            value = await self.store.get(self.key)
        except DataError as exc:
            logger.debug("Counter %r holds non-JSON text; parsing it directly", self.full_key)
            return _coerce_counter(exc.payload)
        return _coerce_counter(value)

    async def incrby(self, amount: int) -> int:
        """Atomically add ``amount`` and return the new value (``amount`` on a fresh key)."""
        return await self.store.incrby(self.key, amount)

    async def zero(self) -> None:
        await self.store.delete(self.key)


@dataclass(frozen=True)
class HashOfCounters(_SchemaKey):
    """A hash of independent integer counters."""

    async def get(self, field: str) -> int:
        return _coerce_counter(await self.store.hget(self.key, field))

    async def incrby(self, field: str, amount: int) -> int:
        return await self.store.hincrby(self.key, field, amount)

    async def zero(self, field: str) -> None:
        """Reset one field by removing it; other fields are untouched."""
        await self.store.hdel(self.key, field)

    async def delete(self) -> None:
        await self.store.delete(self.key)


__all__ = ["Counter", "HashOf", "HashOfCounters", "Obj"]
