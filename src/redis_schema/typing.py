from __future__ import annotations

"""
Typing helpers for redis.asyncio usage.

redis-py exposes unified sync/async command signatures that confuse static type
checkers. ``ensure_awaitable`` narrows them to the async behavior
the root store relies on.
"""


from typing import Awaitable, TypeVar, cast

T = TypeVar("T")


def ensure_awaitable(result: "Awaitable[T] | T") -> Awaitable[T]:
    """
    Coerce redis command results into awaitables for typing purposes.

    The redis.asyncio client always returns awaitables at runtime; the cast only
    narrows redis-py's sync/async union for the type checker.
    """

    return cast(Awaitable[T], result)


__all__ = ["ensure_awaitable"]
