"""objc-property-attributes - decoding of Objective-C property attribute strings."""

from .domain.models import MalformedAttributesError, MemoryPolicy, PropertyAttributes, TypeHandle
from .domain.repositories import (
    CachingTypeRegistry,
    DictTypeRegistry,
    PropertySource,
    TypeRegistry,
    decode_property,
)
from .domain.services import AttributeDecoder, decode, render_declaration
from .infrastructure.config import Config
from .main import main

__all__ = [
    "AttributeDecoder",
    "CachingTypeRegistry",
    "Config",
    "DictTypeRegistry",
    "MalformedAttributesError",
    "MemoryPolicy",
    "PropertyAttributes",
    "PropertySource",
    "TypeHandle",
    "TypeRegistry",
    "decode",
    "decode_property",
    "main",
    "render_declaration",
]
