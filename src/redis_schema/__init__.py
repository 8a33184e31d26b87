"""Typed, collision-checked schema declarations over a shared Redis keyspace."""

from .codecs import Codec, TypeAdapterCodec, codec_for
from .connection import connect_store, create_redis_client
from .exceptions import (
    ApplicationError,
    DataError,
    DuplicateSchemaKeyError,
    ValidationError,
)
from .namespace import StoreNamespace
from .registry import SchemaRegistry
from .schema import Counter, HashOf, HashOfCounters, Obj
from .store import RedisStore, Store

__all__ = [
    "Store",
    "RedisStore",
    "StoreNamespace",
    "SchemaRegistry",
    "Obj",
    "HashOf",
    "Counter",
    "HashOfCounters",
    "Codec",
    "TypeAdapterCodec",
    "codec_for",
    "connect_store",
    "create_redis_client",
    "ApplicationError",
    "DataError",
    "DuplicateSchemaKeyError",
    "ValidationError",
]
