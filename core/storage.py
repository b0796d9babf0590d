"""String key-value stores backing workout persistence.

The persistence layer treats its store as an opaque get/set-by-key string
mapping. In the web app that mapping is the visitor's Django session, which
gives each browser its own workouts the way browser local storage would.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Minimal string store used by the persistence adapter."""

    def get(self, key: str) -> str | None:
        """Return the stored text for `key`, or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any prior content."""

    def delete(self, key: str) -> None:
        """Remove `key` when present."""


class MappingKeyValueStore:
    """KeyValueStore over any mutable mapping (a Django session or a dict)."""

    def __init__(self, mapping: MutableMapping[str, Any]) -> None:
        """Initialize the store.

        Args:
            mapping: Backing mapping. Django sessions mark themselves modified
                on item assignment and deletion, so writes are persisted when
                the response is sent.
        """

        self._mapping = mapping

    def get(self, key: str) -> str | None:
        return self._mapping.get(key)

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value

    def delete(self, key: str) -> None:
        if key in self._mapping:
            del self._mapping[key]
