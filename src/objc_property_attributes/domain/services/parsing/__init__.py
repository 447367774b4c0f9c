"""Attribute string parsing services."""

from .accessor_names import (
    default_getter_name,
    default_setter_name,
    selector_with_capitalized_key,
)
from .attribute_decoder import AttributeDecoder, decode, default_decoder
from .attribute_tokenizer import AttributeToken, classify_token, split_attribute_string, tokenize
from .type_encoding import describe_type_encoding, is_object_encoding, object_class_name

__all__ = [
    "AttributeDecoder",
    "AttributeToken",
    "classify_token",
    "decode",
    "default_decoder",
    "default_getter_name",
    "default_setter_name",
    "describe_type_encoding",
    "is_object_encoding",
    "object_class_name",
    "selector_with_capitalized_key",
    "split_attribute_string",
    "tokenize",
]
