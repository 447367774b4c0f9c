"""Domain services for property attribute decoding."""

from .generation import render_declaration
from .parsing import AttributeDecoder, decode

__all__ = ["AttributeDecoder", "decode", "render_declaration"]
