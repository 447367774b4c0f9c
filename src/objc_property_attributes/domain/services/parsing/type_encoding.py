#!/usr/bin/env python3

"""Inspection of low-level type encodings.

A type encoding is the signature produced by ``@encode()``: ``i`` for int,
``@"NSString"`` for a pointer to an NSString instance, ``{CGPoint=dd}`` for a
struct and so on. This module answers the two questions the decoder and the
declaration renderer need: which class an object encoding names, and how the
encoding would be spelled in a C declaration.
"""

from ...models.token_constants import (
    BLOCK_TYPE_ENCODING,
    GENERIC_OBJECT_NAMES,
    NAMED_OBJECT_PREFIX,
    OBJECT_TYPE_PREFIX,
    PRIMITIVE_TYPE_NAMES,
    QUOTE,
    TYPE_QUALIFIERS,
)

PROTOCOL_LIST_START = "<"


def is_object_encoding(type_encoding: str) -> bool:
    """Check if a type encoding denotes an object reference (including blocks)."""
    return type_encoding.startswith(OBJECT_TYPE_PREFIX)


def object_class_name(
    type_encoding: str, generic_names: frozenset[str] = GENERIC_OBJECT_NAMES
) -> str | None:
    """Extract the class name from a named object type encoding.

    Protocol qualifiers are dropped, so ``@"NSString<NSCopying>"`` names
    ``NSString``. Encodings that only say "some object" have no class name.

    Args:
        type_encoding: Type encoding, without the leading ``T``
        generic_names: Quoted names that mean "any object"

    Returns:
        The class name, or None for non-object types, ``@``, ``@?``,
        protocol-only ``@"<NSCopying>"`` and generic names

    Examples:
        - '@"NSString"': "NSString"
        - '@"NSArray<NSCopying>"': "NSArray"
        - '@"<NSCopying>"': None
        - "@": None
        - "i": None
    """
    if not type_encoding.startswith(NAMED_OBJECT_PREFIX):
        return None
    if len(type_encoding) <= len(NAMED_OBJECT_PREFIX) or not type_encoding.endswith(QUOTE):
        return None

    quoted = type_encoding[len(NAMED_OBJECT_PREFIX) : -1]
    class_name = quoted.split(PROTOCOL_LIST_START, 1)[0]
    if not class_name or class_name in generic_names:
        return None
    return class_name


def describe_type_encoding(type_encoding: str) -> str:
    """Spell a type encoding the way it would appear in a C declaration.

    This is best-effort: encodings that cannot be parsed completely are
    returned verbatim rather than raising.

    Args:
        type_encoding: Type encoding, without the leading ``T``

    Returns:
        C spelling of the type

    Examples:
        - "i": "int"
        - '@"NSString"': "NSString *"
        - "^{CGPoint=dd}": "struct CGPoint *"
        - "[4i]": "int[4]"
    """
    try:
        described, end = _describe_at(type_encoding, 0)
    except ValueError:
        return type_encoding

    if end != len(type_encoding):
        return type_encoding
    return described


def _describe_at(encoding: str, index: int) -> tuple[str, int]:
    """Describe the single type starting at ``index``.

    Returns:
        Tuple of (C spelling, index just past the type)

    Raises:
        ValueError: If the encoding ends early or uses an unknown type code
    """
    if index >= len(encoding):
        raise ValueError(f"Unexpected end of type encoding {encoding!r}")

    code = encoding[index]

    if code in TYPE_QUALIFIERS:
        inner, end = _describe_at(encoding, index + 1)
        return (f"const {inner}" if code == "r" else inner), end

    if code == OBJECT_TYPE_PREFIX:
        if encoding.startswith(BLOCK_TYPE_ENCODING, index):
            return "id /* block */", index + len(BLOCK_TYPE_ENCODING)
        if encoding.startswith(NAMED_OBJECT_PREFIX, index):
            close = encoding.find(QUOTE, index + len(NAMED_OBJECT_PREFIX))
            if close == -1:
                raise ValueError(f"Unterminated class name in {encoding!r}")
            name = encoding[index + len(NAMED_OBJECT_PREFIX) : close]
            return _describe_object(name), close + 1
        return "id", index + 1

    if code == "^":
        inner, end = _describe_at(encoding, index + 1)
        return _pointer_to(inner), end

    if code in "{(":
        close = _matching_close(encoding, index)
        name = encoding[index + 1 : close].split("=", 1)[0]
        keyword = "struct" if code == "{" else "union"
        if name in ("", "?"):
            return keyword, close + 1
        return f"{keyword} {name}", close + 1

    if code == "[":
        count_end = index + 1
        while count_end < len(encoding) and encoding[count_end].isdigit():
            count_end += 1
        inner, end = _describe_at(encoding, count_end)
        if end >= len(encoding) or encoding[end] != "]":
            raise ValueError(f"Unterminated array in {encoding!r}")
        return f"{inner}[{encoding[index + 1 : count_end]}]", end + 1

    if code == "b":
        width_end = index + 1
        while width_end < len(encoding) and encoding[width_end].isdigit():
            width_end += 1
        if width_end == index + 1:
            raise ValueError(f"Bitfield without width in {encoding!r}")
        return f"unsigned int : {encoding[index + 1 : width_end]}", width_end

    if code in PRIMITIVE_TYPE_NAMES:
        return PRIMITIVE_TYPE_NAMES[code], index + 1

    raise ValueError(f"Unknown type code {code!r} in {encoding!r}")


def _describe_object(name: str) -> str:
    if not name:
        return "id"
    if name.startswith(PROTOCOL_LIST_START):
        return f"id{name}"
    return f"{name} *"


def _pointer_to(inner: str) -> str:
    if inner.endswith("*"):
        return f"{inner}*"
    return f"{inner} *"


def _matching_close(encoding: str, start: int) -> int:
    """Find the bracket closing the struct or union opened at ``start``.

    Field names inside a struct body are quoted and skipped.
    """
    depth = 0
    in_quotes = False
    for index in range(start, len(encoding)):
        char = encoding[index]
        if char == QUOTE:
            in_quotes = not in_quotes
        elif in_quotes:
            continue
        elif char in "{(":
            depth += 1
        elif char in "})":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError(f"Unterminated aggregate in {encoding!r}")
