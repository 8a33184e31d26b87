from __future__ import annotations

"""Connection settings for the Redis-backed root store."""


from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union, cast

from .errors import ConfigurationError
from .runtime import env_float, env_int, env_str

DEFAULT_REDIS_URL = "redis://127.0.0.1:6379/0"
_SUPPORTED_SCHEMES = ("redis://", "rediss://", "unix://")


@dataclass(frozen=True)
class StoreSettings:
    url: str
    socket_timeout: float | None = None
    socket_connect_timeout: float | None = None
    health_check_interval: float | None = None
    max_connections: int | None = None

    def client_kwargs(self) -> dict[str, Union[float, int]]:
        """Return the optional ``redis.asyncio.from_url`` keyword arguments that are set."""
        kwargs: dict[str, Union[float, int]] = {}
        if self.socket_timeout is not None:
            kwargs["socket_timeout"] = self.socket_timeout
        if self.socket_connect_timeout is not None:
            kwargs["socket_connect_timeout"] = self.socket_connect_timeout
        if self.health_check_interval is not None:
            kwargs["health_check_interval"] = self.health_check_interval
        if self.max_connections is not None:
            kwargs["max_connections"] = self.max_connections
        return kwargs


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    url = cast(str, env_str("REDIS_URL", or_value=DEFAULT_REDIS_URL))
    _validate_url(url)

    max_connections = env_int("REDIS_MAX_CONNECTIONS")
    if max_connections is not None and max_connections < 1:
        raise ConfigurationError.invalid_value("REDIS_MAX_CONNECTIONS", max_connections, "Must be at least 1")

    return StoreSettings(
        url=url,
        socket_timeout=_non_negative("REDIS_SOCKET_TIMEOUT", env_float("REDIS_SOCKET_TIMEOUT")),
        socket_connect_timeout=_non_negative(
            "REDIS_SOCKET_CONNECT_TIMEOUT", env_float("REDIS_SOCKET_CONNECT_TIMEOUT")
        ),
        health_check_interval=_non_negative(
            "REDIS_HEALTH_CHECK_INTERVAL", env_float("REDIS_HEALTH_CHECK_INTERVAL")
        ),
        max_connections=max_connections,
    )


def _validate_url(url: str) -> None:
    if not url.startswith(_SUPPORTED_SCHEMES):
        raise ConfigurationError.invalid_format(
            "REDIS_URL", url, "redis://, rediss:// or unix:// URL"
        )


def _non_negative(name: str, value: Optional[float]) -> Optional[float]:
    if value is not None and value < 0:
        raise ConfigurationError.invalid_value(name, value, "Must be non-negative")
    return value


__all__ = ["DEFAULT_REDIS_URL", "StoreSettings", "get_store_settings"]
