"""In-memory cache of prefix search results."""

import logging
import threading
from collections.abc import Iterable, Mapping, MutableMapping
from types import MappingProxyType

from cachetools import FIFOCache

logger = logging.getLogger(__name__)


class ResultCache:
    """Thread-safe mapping of prefix -> previously fetched category names.

    Entries are stored as tuples, so a stored list can't be changed through
    a reference held by the caller that put it. Reads hand back fresh lists.
    """

    def __init__(
        self,
        entries: Mapping[str, Iterable[str]] | None = None,
        max_entries: int | None = None,
    ):
        """Initialize the cache.

        Args:
            entries: Optional initial contents
            max_entries: Evict the oldest entry beyond this size; None for unbounded
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._lock = threading.Lock()
        self._entries: MutableMapping[str, tuple[str, ...]] = (
            FIFOCache(maxsize=max_entries) if max_entries is not None else {}
        )
        for prefix, items in (entries or {}).items():
            self.put(prefix, items)

    def get(self, prefix: str) -> list[str] | None:
        """Get the cached names for a prefix, or None when absent."""
        with self._lock:
            items = self._entries.get(prefix)
        return list(items) if items is not None else None

    def contains(self, prefix: str) -> bool:
        with self._lock:
            return prefix in self._entries

    def put(self, prefix: str, items: Iterable[str]) -> None:
        """Store (or replace) the names fetched for a prefix."""
        snapshot = tuple(items)
        with self._lock:
            self._entries[prefix] = snapshot

    def snapshot(self) -> Mapping[str, tuple[str, ...]]:
        """Return a read-only copy of the current contents."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, prefix: object) -> bool:
        return isinstance(prefix, str) and self.contains(prefix)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
