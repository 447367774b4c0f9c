#!/usr/bin/env python3

"""LRU cache for type registry lookups."""

from collections import OrderedDict
from typing import Any


class LRUCache:
    """LRU cache keyed by type name, with hit/miss statistics.

    Not thread-safe on its own; callers sharing an instance must lock.
    """

    def __init__(self, max_size: int = 1024):
        """Initialize LRU cache with maximum size.

        Args:
            max_size: Maximum number of names to cache
        """
        self.max_size = max_size
        self.cache: OrderedDict[str, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: str, default: Any = None) -> Any:
        """Get item from cache, moving it to end (most recently used).

        Args:
            key: Type name
            default: Returned when the name is not cached

        Returns:
            Cached value, which may itself be None, or ``default``
        """
        if key in self.cache:
            self.cache.move_to_end(key)
            self.hits += 1
            return self.cache[key]

        self.misses += 1
        return default

    def put(self, key: str, value: Any) -> None:
        """Add item to cache, evicting the least recently used if full.

        A cache with a non-positive max_size stores nothing.

        Args:
            key: Type name
            value: Resolved handle, or None for a name that did not resolve
        """
        if self.max_size <= 0:
            return

        if key in self.cache:
            self.cache.move_to_end(key)
        elif len(self.cache) >= self.max_size:
            self.cache.popitem(last=False)

        self.cache[key] = value

    def clear(self) -> None:
        """Clear all cached items."""
        self.cache.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache performance metrics
        """
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "size": len(self.cache),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": f"{hit_rate:.1f}%",
        }

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, key: str) -> bool:
        """Check if key exists in cache without affecting LRU order."""
        return key in self.cache
