"""Caching for type registry lookups."""

from .lru_cache import LRUCache

__all__ = ["LRUCache"]
