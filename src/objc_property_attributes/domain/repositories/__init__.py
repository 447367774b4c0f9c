"""Collaborators supplying attribute strings and resolving type names."""

from .cache import LRUCache
from .property_source import PropertyListSource, PropertySource, decode_property
from .type_registry import CachingTypeRegistry, DictTypeRegistry, TypeRegistry

__all__ = [
    "CachingTypeRegistry",
    "DictTypeRegistry",
    "LRUCache",
    "PropertyListSource",
    "PropertySource",
    "TypeRegistry",
    "decode_property",
]
