from __future__ import annotations

"""Shared helpers for moving payloads in and out of Redis.

Values written through ``Store.set`` and hash fields written by ``HashOf`` are
stored as JSON text. Keeping the encode/decode step in one place means the
root store and the schema builders agree on the transport form.
"""

from typing import Any

import orjson

from .exceptions import DataError

__all__ = [
    "decode_redis_value",
    "decode_json_payload",
    "encode_json_payload",
]


def decode_redis_value(value: Any) -> Any:
    """Normalise a Redis value into its Python representation.

    Clients created without ``decode_responses`` return ``bytes``; those are
    decoded as UTF-8. Non-bytes values are returned untouched so integers
    survive round-trips.
    """

    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def encode_json_payload(value: Any) -> str:
    """Serialize *value* to the JSON text stored in Redis."""

    try:
        return orjson.dumps(value).decode("utf-8")
    except orjson.JSONEncodeError as exc:
        raise DataError(f"Value of type {type(value).__name__} is not JSON serializable") from exc


def decode_json_payload(raw: Any) -> Any:
    """Parse JSON text read from Redis.

    Only ``None`` means "no value". An empty string is not JSON and is
    rejected like any other malformed payload.

    Raises:
        DataError: If the stored text is not valid JSON.
    """

    text = decode_redis_value(raw)
    if text is None:
        return None
    if not isinstance(text, str):
        # Already a Python value (e.g. an int from a client that parses replies).
        return text
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise DataError(f"Stored payload is not valid JSON: {text[:64]!r}", payload=text) from exc
