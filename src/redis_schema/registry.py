from __future__ import annotations

"""Registry of fully-qualified keys claimed by schema declarations."""


import logging
import threading
from typing import Set

from .exceptions import DuplicateSchemaKeyError

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """
    Set of keys claimed by schema declarations on one root store.

    A key can be claimed once for the lifetime of the registry. Claims are
    never released; deleting the value behind a key leaves its claim in place.
    Declarations normally happen while a process wires itself up, so a
    duplicate is raised immediately instead of being reported later.
    """

    def __init__(self) -> None:
        self._keys: Set[str] = set()
        self._lock = threading.Lock()

    def mark_key_as_used(self, key: str) -> None:
        """
        Claim a fully-qualified key.

        Raises:
            DuplicateSchemaKeyError: If the key was already claimed
        """
        with self._lock:
            if key in self._keys:
                raise DuplicateSchemaKeyError(key)
            self._keys.add(key)
        logger.debug("Registered schema key %r", key)

    def is_used(self, key: str) -> bool:
        return key in self._keys

    def keys(self) -> list[str]:
        """Sorted snapshot of every claimed key."""
        with self._lock:
            return sorted(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)


__all__ = ["SchemaRegistry"]
