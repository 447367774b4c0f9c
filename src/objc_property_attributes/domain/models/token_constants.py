#!/usr/bin/env python3

"""Attribute token constants and classification tables.

An encoded property attribute string looks like ``T@"NSString",C,N,V_name``:
a type token followed by single-letter qualifiers, some of which carry a
payload (``G``, ``S`` and ``V``). These constants describe that format and are
used by the tokenizer and the decoder to classify tokens consistently.
"""

from enum import Enum


class TokenKind(Enum):
    """Kinds of tokens that can appear in an attribute string."""

    TYPE = "type"
    READONLY = "readonly"
    NONATOMIC = "nonatomic"
    GETTER = "getter"
    SETTER = "setter"
    RETAIN = "retain"
    COPY = "copy"
    WEAK = "weak"
    BACKING_STORAGE = "backing_storage"
    DYNAMIC = "dynamic"
    GARBAGE_COLLECTABLE = "garbage_collectable"
    LEGACY_TYPE = "legacy_type"  # Old-style type encoding, unsupported
    UNKNOWN = "unknown"


TYPE_PREFIX = "T"
TOKEN_SEPARATOR = ","
QUOTE = '"'

# Leading character of each non-type token and what it means
LEADING_CHAR_TO_KIND: dict[str, TokenKind] = {
    "R": TokenKind.READONLY,
    "N": TokenKind.NONATOMIC,
    "G": TokenKind.GETTER,
    "S": TokenKind.SETTER,
    "&": TokenKind.RETAIN,
    "C": TokenKind.COPY,
    "W": TokenKind.WEAK,
    "V": TokenKind.BACKING_STORAGE,
    "D": TokenKind.DYNAMIC,
    "t": TokenKind.LEGACY_TYPE,
}

# Markers flagging a property as eligible for garbage collection.
# Kept separate from LEADING_CHAR_TO_KIND so the set can be configured.
GARBAGE_COLLECTION_MARKERS = frozenset({"P"})

# Type encoding prefixes for object references
OBJECT_TYPE_PREFIX = "@"
NAMED_OBJECT_PREFIX = '@"'
BLOCK_TYPE_ENCODING = "@?"

# Quoted names that still mean "any object" and are never looked up
GENERIC_OBJECT_NAMES = frozenset({"id"})

# Method qualifiers that may precede a type code (const, in, inout, out,
# bycopy, byref, oneway)
TYPE_QUALIFIERS = frozenset("rnNoORV")

PRIMITIVE_TYPE_NAMES: dict[str, str] = {
    "c": "char",
    "i": "int",
    "s": "short",
    "l": "long",
    "q": "long long",
    "C": "unsigned char",
    "I": "unsigned int",
    "S": "unsigned short",
    "L": "unsigned long",
    "Q": "unsigned long long",
    "f": "float",
    "d": "double",
    "D": "long double",
    "B": "BOOL",
    "v": "void",
    "*": "char *",
    "#": "Class",
    ":": "SEL",
    "?": "void",  # Unknown type, typically a function pointer target
}
