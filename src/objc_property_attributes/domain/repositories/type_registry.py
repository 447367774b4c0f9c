#!/usr/bin/env python3

"""Type registries that resolve class names to type handles.

The decoder only needs ``resolve_type_name``. Real registries wrap a live
runtime; the ones here are in-memory and are used by the CLI and in tests.
"""

import threading
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from ...infrastructure.config import get_config
from ...infrastructure.logging import get_logger
from ..models.property_attributes import TypeHandle
from .cache import LRUCache

logger = get_logger(__name__)

_MISSING = object()


class TypeRegistry(Protocol):
    """Resolves type names to handles.

    Implementations must be safe to call from multiple threads and must
    return None for unknown names instead of raising.
    """

    def resolve_type_name(self, name: str) -> Any | None: ...


class DictTypeRegistry:
    """Registry backed by a fixed name-to-handle mapping.

    The mapping is copied on construction and never modified, so concurrent
    lookups need no locking.
    """

    def __init__(self, types: Mapping[str, Any] | None = None):
        self._types: dict[str, Any] = dict(types or {})

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "DictTypeRegistry":
        """Create a registry mapping each name to a TypeHandle of that name."""
        return cls({name: TypeHandle(name) for name in names})

    def resolve_type_name(self, name: str) -> Any | None:
        return self._types.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


class CachingTypeRegistry:
    """Registry that memoizes another registry's lookups.

    Unknown names are cached as well. Lookups are serialized, so each
    distinct name reaches the wrapped registry at most once while it stays
    in the cache, even when called from several threads. A cache size of
    zero disables caching and every call reaches the wrapped registry.
    """

    def __init__(self, registry: TypeRegistry, max_size: int | None = None):
        """Wrap a registry.

        Args:
            registry: Registry whose lookups are cached
            max_size: Cache size; defaults to the TYPE_CACHE_SIZE setting
        """
        if max_size is None:
            max_size = get_config()["TYPE_CACHE_SIZE"]
        self._registry = registry
        self._cache = LRUCache(max_size)
        self._lock = threading.Lock()

    def resolve_type_name(self, name: str) -> Any | None:
        with self._lock:
            cached = self._cache.get(name, _MISSING)
            if cached is not _MISSING:
                return cached

            handle = self._registry.resolve_type_name(name)
            logger.debug(f"Resolved type name '{name}': {'found' if handle is not None else 'not found'}")

            self._cache.put(name, handle)
            return handle

    def stats(self) -> dict[str, Any]:
        """Get statistics of the underlying cache."""
        with self._lock:
            return self._cache.stats()
