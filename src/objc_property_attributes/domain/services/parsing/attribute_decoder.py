#!/usr/bin/env python3

"""Decoding of encoded property attribute strings into PropertyAttributes.

The decoder performs one scan over the classified tokens, applying each
token's effect from a table, then a second pass that:
- forces the assign memory policy for read-only properties
- infers getter and setter names that were not given explicitly
- resolves a named object class through the injected type registry

Unknown tokens are ignored so newer attribute letters never break decoding.
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from ...models.errors import MalformedAttributesError
from ...models.property_attributes import MemoryPolicy, PropertyAttributes
from ...models.token_constants import TokenKind
from .accessor_names import default_getter_name, default_setter_name
from .attribute_tokenizer import AttributeToken, tokenize
from .type_encoding import object_class_name

if TYPE_CHECKING:
    from ...repositories.type_registry import TypeRegistry

logger = get_logger(__name__)


@dataclass
class _DecodeState:
    """Fields accumulated during the token scan."""

    type_encoding: str
    is_readonly: bool = False
    is_nonatomic: bool = False
    is_weak: bool = False
    is_garbage_collectable: bool = False
    is_dynamic: bool = False
    memory_policy: MemoryPolicy = MemoryPolicy.ASSIGN
    getter_name: str | None = None
    setter_name: str | None = None
    backing_storage_name: str | None = None


def _set_readonly(state: _DecodeState, payload: str) -> None:
    state.is_readonly = True


def _set_nonatomic(state: _DecodeState, payload: str) -> None:
    state.is_nonatomic = True


def _set_getter(state: _DecodeState, payload: str) -> None:
    if payload:
        state.getter_name = payload


def _set_setter(state: _DecodeState, payload: str) -> None:
    if payload:
        state.setter_name = payload


def _set_retain(state: _DecodeState, payload: str) -> None:
    state.memory_policy = MemoryPolicy.RETAIN


def _set_copy(state: _DecodeState, payload: str) -> None:
    state.memory_policy = MemoryPolicy.COPY


def _set_weak(state: _DecodeState, payload: str) -> None:
    state.is_weak = True


def _set_backing_storage(state: _DecodeState, payload: str) -> None:
    state.backing_storage_name = payload or None


def _set_dynamic(state: _DecodeState, payload: str) -> None:
    state.is_dynamic = True


def _set_garbage_collectable(state: _DecodeState, payload: str) -> None:
    state.is_garbage_collectable = True


TOKEN_EFFECTS: dict[TokenKind, Callable[[_DecodeState, str], None]] = {
    TokenKind.READONLY: _set_readonly,
    TokenKind.NONATOMIC: _set_nonatomic,
    TokenKind.GETTER: _set_getter,
    TokenKind.SETTER: _set_setter,
    TokenKind.RETAIN: _set_retain,
    TokenKind.COPY: _set_copy,
    TokenKind.WEAK: _set_weak,
    TokenKind.BACKING_STORAGE: _set_backing_storage,
    TokenKind.DYNAMIC: _set_dynamic,
    TokenKind.GARBAGE_COLLECTABLE: _set_garbage_collectable,
}


class AttributeDecoder:
    """Decodes attribute strings for one type registry.

    The decoder holds no mutable state, so a single instance can be shared
    between threads as long as its registry's lookups are thread-safe.

    Attributes:
        registry: Registry used to resolve object class names, or None
        resolve_types: Whether class names are looked up at all
        gc_markers: Leading characters marking garbage-collectable properties
        generic_object_names: Quoted class names that are never looked up
    """

    def __init__(
        self,
        registry: "TypeRegistry | None" = None,
        *,
        resolve_types: bool | None = None,
        gc_markers: frozenset[str] | None = None,
        generic_object_names: frozenset[str] | None = None,
    ):
        """Initialize the decoder, filling unset options from get_config().

        Args:
            registry: Registry used to resolve object class names
            resolve_types: Override for the RESOLVE_TYPES setting
            gc_markers: Override for the GC_MARKERS setting
            generic_object_names: Override for the GENERIC_OBJECT_NAMES setting
        """
        config = get_config()
        self.registry = registry
        self.resolve_types = config["RESOLVE_TYPES"] if resolve_types is None else resolve_types
        self.gc_markers = config["GC_MARKERS"] if gc_markers is None else gc_markers
        self.generic_object_names = (
            config["GENERIC_OBJECT_NAMES"]
            if generic_object_names is None
            else generic_object_names
        )

    def decode(self, raw_attributes: bytes | str, property_name: str) -> PropertyAttributes:
        """Decode one property's attribute string.

        Args:
            raw_attributes: Attribute string as supplied by the runtime
            property_name: Declared name of the property

        Returns:
            Fully populated PropertyAttributes

        Raises:
            MalformedAttributesError: If the input has no valid leading type
                token or an unterminated quoted class name
        """
        attributes = _as_text(raw_attributes)
        type_token, *attribute_tokens = tokenize(attributes, self.gc_markers)

        state = _DecodeState(type_encoding=type_token.payload)
        for token in attribute_tokens:
            self._apply(state, token, property_name)

        if state.is_readonly:
            state.memory_policy = MemoryPolicy.ASSIGN

        return PropertyAttributes(
            declared_type_encoding=state.type_encoding,
            getter_name=state.getter_name or default_getter_name(property_name),
            setter_name=state.setter_name or default_setter_name(property_name),
            is_readonly=state.is_readonly,
            is_nonatomic=state.is_nonatomic,
            is_weak=state.is_weak,
            is_garbage_collectable=state.is_garbage_collectable,
            is_dynamic=state.is_dynamic,
            memory_policy=state.memory_policy,
            backing_storage_name=state.backing_storage_name,
            resolved_object_type=self._resolve_object_type(state.type_encoding),
        )

    def with_registry(self, registry: "TypeRegistry | None") -> "AttributeDecoder":
        """Return a copy of this decoder that resolves names through ``registry``."""
        decoder = copy.copy(self)
        decoder.registry = registry
        return decoder

    def _apply(self, state: _DecodeState, token: AttributeToken, property_name: str) -> None:
        effect = TOKEN_EFFECTS.get(token.kind)
        if effect is not None:
            effect(state, token.payload)
        elif token.kind == TokenKind.LEGACY_TYPE:
            logger.debug(
                f"Ignoring old-style type encoding {token.raw!r} for property '{property_name}'"
            )
        else:
            logger.debug(f"Ignoring unknown attribute {token.raw!r} for property '{property_name}'")

    def _resolve_object_type(self, type_encoding: str) -> Any | None:
        """Look up the class named by an object type encoding.

        At most one lookup is made. A name the registry does not know is
        not an error and simply yields None.
        """
        if self.registry is None or not self.resolve_types:
            return None

        class_name = object_class_name(type_encoding, self.generic_object_names)
        if class_name is None:
            return None

        handle = self.registry.resolve_type_name(class_name)
        if handle is None:
            logger.debug(f"Type registry does not know class '{class_name}'")
        return handle


@lru_cache(maxsize=1)
def default_decoder() -> AttributeDecoder:
    """Registry-less decoder with settings read once from get_config().

    Call ``default_decoder.cache_clear()`` to pick up changed settings.
    """
    return AttributeDecoder()


def decode(
    raw_attributes: bytes | str,
    property_name: str,
    registry: "TypeRegistry | None" = None,
) -> PropertyAttributes:
    """Decode one property's attribute string.

    Convenience wrapper around default_decoder(). Settings are read from
    the environment on the first call only.

    Args:
        raw_attributes: Attribute string as supplied by the runtime
        property_name: Declared name of the property
        registry: Registry used to resolve object class names

    Returns:
        Fully populated PropertyAttributes

    Raises:
        MalformedAttributesError: If the input is malformed
    """
    decoder = default_decoder()
    if registry is not None:
        decoder = decoder.with_registry(registry)
    return decoder.decode(raw_attributes, property_name)


def _as_text(raw_attributes: bytes | str) -> str:
    if isinstance(raw_attributes, str):
        return raw_attributes
    try:
        return bytes(raw_attributes).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedAttributesError(raw_attributes, f"not valid UTF-8 ({e.reason})") from e
