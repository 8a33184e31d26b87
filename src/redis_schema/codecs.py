from __future__ import annotations

"""
Codecs translate between typed values and the JSON structures kept in Redis.

Schema objects never inspect payloads themselves; a codec's ``read`` is the only
place where stored data is checked against the declared type.
"""

from typing import Any, Generic, Protocol, TypeVar

import pydantic

from .exceptions import ValidationError

T = TypeVar("T")


class Codec(Protocol[T]):
    """Validate raw payloads into ``T`` and turn ``T`` back into raw payloads."""

    def read(self, raw: Any) -> T:
        """Return the typed value, raising ``ValidationError`` on a shape mismatch."""
        ...

    def write(self, value: T) -> Any:
        """Return a JSON-compatible representation of ``value``."""
        ...


class TypeAdapterCodec(Generic[T]):
    """
    Codec backed by a pydantic ``TypeAdapter``.

    ``read`` receives ``None`` when the key or field is absent, so declare
    ``Optional[...]`` types for values that may be missing. Writes use JSON mode:
    tuples come back from Redis as lists and are re-validated into tuples by
    ``read``.
    """

    def __init__(self, tp: Any) -> None:
        self._type = tp
        self._adapter: pydantic.TypeAdapter[T] = pydantic.TypeAdapter(tp)

    def read(self, raw: Any) -> T:
        try:
            return self._adapter.validate_python(raw)
        except pydantic.ValidationError as exc:
            raise ValidationError(
                f"Stored value does not match {self._describe()}: {exc.error_count()} error(s)",
                errors=exc.errors(include_url=False),
                raw=raw,
            ) from exc

    def write(self, value: T) -> Any:
        return self._adapter.dump_python(value, mode="json")

    def _describe(self) -> str:
        return getattr(self._type, "__name__", None) or repr(self._type)

    def __repr__(self) -> str:
        return f"TypeAdapterCodec({self._describe()})"


def codec_for(tp: Any) -> TypeAdapterCodec[Any]:
    """Shorthand for ``TypeAdapterCodec(tp)``."""
    return TypeAdapterCodec(tp)


__all__ = ["Codec", "TypeAdapterCodec", "codec_for"]
