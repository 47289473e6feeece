"""
Cache of constructed singleton instances.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Any

logger = logging.getLogger(__name__)


class SingletonInstanceCache:
    """
    Holds at most one constructed instance per singleton instance key.

    ``get_or_create`` runs the check-then-construct step under a re-entrant
    lock, so a constructor may resolve further singletons on the same thread
    while other threads wait for the key to be filled.
    """

    def __init__(self) -> None:
        self._instances: dict[Hashable, Any] = {}
        self._lock = threading.RLock()

    def get_or_create(self, key: Hashable, create: Callable[[], Any]) -> Any:
        """Return the instance cached under ``key``, constructing it with ``create`` if absent."""
        with self._lock:
            if key in self._instances:
                logger.debug("Reusing singleton instance for %s", _describe(key))
                return self._instances[key]

            instance = create()
            self._instances[key] = instance
            return instance

    def has(self, key: Hashable) -> bool:
        """Check if an instance is cached under ``key``."""
        return key in self._instances

    def clear(self) -> None:
        """Drop every cached instance."""
        with self._lock:
            logger.debug("Clearing %d saved singleton instance(s)", len(self._instances))
            self._instances.clear()

    def __len__(self) -> int:
        return len(self._instances)


def _describe(key: Hashable) -> str:
    if isinstance(key, tuple):
        return " ".join(_describe(part) for part in key)
    return getattr(key, "__name__", str(key))
