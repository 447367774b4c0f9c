"""Domain layer for property attribute decoding."""

from .models import MemoryPolicy, PropertyAttributes
from .services import AttributeDecoder, decode

__all__ = ["AttributeDecoder", "MemoryPolicy", "PropertyAttributes", "decode"]
