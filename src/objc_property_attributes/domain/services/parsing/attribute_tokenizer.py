#!/usr/bin/env python3

"""Tokenization of encoded property attribute strings.

Splits an attribute string into its comma-separated tokens and classifies
each one by its leading character. The type token is scanned with quote
tracking so a quoted class name such as ``@"NSString"`` is kept whole.
"""

from dataclasses import dataclass

from ....infrastructure.logging import get_logger
from ...models.errors import MalformedAttributesError
from ...models.token_constants import (
    GARBAGE_COLLECTION_MARKERS,
    LEADING_CHAR_TO_KIND,
    QUOTE,
    TOKEN_SEPARATOR,
    TYPE_PREFIX,
    TokenKind,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class AttributeToken:
    """A single classified token.

    Attributes:
        kind: What the token means
        payload: Text after the leading character (getter name, type encoding, ...)
        raw: The token exactly as it appeared in the attribute string
    """

    kind: TokenKind
    payload: str
    raw: str


def split_attribute_string(attributes: str) -> list[str]:
    """Split an attribute string into raw tokens, type token first.

    Args:
        attributes: Attribute string, e.g. ``T@"NSString",C,N,V_name``

    Returns:
        Raw tokens in order of appearance. Empty tokens are dropped.

    Raises:
        MalformedAttributesError: If there is no non-empty leading type token or
            a quoted class name in it is never closed
    """
    if not attributes.startswith(TYPE_PREFIX):
        raise MalformedAttributesError(attributes, "missing leading type token")

    in_quotes = False
    type_end = len(attributes)
    for index, char in enumerate(attributes):
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == TOKEN_SEPARATOR and not in_quotes:
            type_end = index
            break

    if in_quotes:
        raise MalformedAttributesError(attributes, "unterminated quoted class name")

    type_token = attributes[:type_end]
    if len(type_token) == len(TYPE_PREFIX):
        raise MalformedAttributesError(attributes, "empty type encoding")

    tokens = [type_token]
    if type_end < len(attributes):
        remainder = attributes[type_end + 1 :]
        tokens.extend(token for token in remainder.split(TOKEN_SEPARATOR) if token)
    return tokens


def classify_token(
    token: str, gc_markers: frozenset[str] = GARBAGE_COLLECTION_MARKERS
) -> AttributeToken:
    """Classify a non-type token by its leading character.

    Args:
        token: Non-empty raw token
        gc_markers: Leading characters that mark garbage-collectable properties

    Returns:
        Classified token; unrecognized leading characters yield TokenKind.UNKNOWN
    """
    leading = token[0]
    kind = LEADING_CHAR_TO_KIND.get(leading)
    if kind is None:
        kind = TokenKind.GARBAGE_COLLECTABLE if leading in gc_markers else TokenKind.UNKNOWN
    return AttributeToken(kind=kind, payload=token[1:], raw=token)


def tokenize(
    attributes: str, gc_markers: frozenset[str] = GARBAGE_COLLECTION_MARKERS
) -> list[AttributeToken]:
    """Tokenize and classify an attribute string.

    Args:
        attributes: Attribute string to tokenize
        gc_markers: Leading characters that mark garbage-collectable properties

    Returns:
        Classified tokens; the first one is always of kind TokenKind.TYPE

    Raises:
        MalformedAttributesError: See split_attribute_string
    """
    type_token, *others = split_attribute_string(attributes)
    tokens = [AttributeToken(kind=TokenKind.TYPE, payload=type_token[1:], raw=type_token)]
    tokens.extend(classify_token(token, gc_markers) for token in others)

    logger.debug(f"Tokenized {attributes!r} into {len(tokens)} tokens")
    return tokens
