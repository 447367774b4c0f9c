#!/usr/bin/env python3

"""Property attribute domain models."""

from .errors import MalformedAttributesError
from .property_attributes import MemoryPolicy, PropertyAttributes, TypeHandle
from .token_constants import (
    GARBAGE_COLLECTION_MARKERS,
    GENERIC_OBJECT_NAMES,
    LEADING_CHAR_TO_KIND,
    TokenKind,
)

__all__ = [
    "GARBAGE_COLLECTION_MARKERS",
    "GENERIC_OBJECT_NAMES",
    "LEADING_CHAR_TO_KIND",
    "MalformedAttributesError",
    "MemoryPolicy",
    "PropertyAttributes",
    "TokenKind",
    "TypeHandle",
]
