#!/usr/bin/env python3

"""Decoded property attribute model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .token_constants import OBJECT_TYPE_PREFIX


class MemoryPolicy(Enum):
    """How a reference-typed property manages the value it holds."""

    ASSIGN = "assign"
    RETAIN = "retain"
    COPY = "copy"


@dataclass(frozen=True)
class TypeHandle:
    """Opaque handle for a named type known to an in-memory registry."""

    name: str


@dataclass(frozen=True)
class PropertyAttributes:
    """Everything an attribute string says about one property.

    Instances are produced by the decoder and never modified afterwards.
    ``memory_policy`` is always ``MemoryPolicy.ASSIGN`` for read-only
    properties, and ``setter_name`` is populated even then: it names the
    setter the property would have if it were writable.
    """

    declared_type_encoding: str
    getter_name: str
    setter_name: str
    is_readonly: bool = False
    is_nonatomic: bool = False
    is_weak: bool = False
    is_garbage_collectable: bool = False
    is_dynamic: bool = False
    memory_policy: MemoryPolicy = MemoryPolicy.ASSIGN
    backing_storage_name: str | None = None
    resolved_object_type: Any | None = None

    @property
    def is_object_type(self) -> bool:
        """True if the type encoding denotes an object reference."""
        return self.declared_type_encoding.startswith(OBJECT_TYPE_PREFIX)

    @property
    def object_class_name(self) -> str | None:
        """Class name embedded in the type encoding, resolved or not.

        Names configured as generic (OBJC_GENERIC_OBJECT_NAMES) yield None,
        matching what the default decoder would look up.
        """
        # Imported here, the parsing package depends on this module
        from ..services.parsing.attribute_decoder import default_decoder
        from ..services.parsing.type_encoding import object_class_name

        return object_class_name(
            self.declared_type_encoding, default_decoder().generic_object_names
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        resolved = self.resolved_object_type
        if isinstance(resolved, TypeHandle):
            resolved = resolved.name
        elif resolved is not None:
            resolved = repr(resolved)

        return {
            "type_encoding": self.declared_type_encoding,
            "getter": self.getter_name,
            "setter": self.setter_name,
            "readonly": self.is_readonly,
            "nonatomic": self.is_nonatomic,
            "weak": self.is_weak,
            "garbage_collectable": self.is_garbage_collectable,
            "dynamic": self.is_dynamic,
            "memory_policy": self.memory_policy.value,
            "backing_storage": self.backing_storage_name,
            "resolved_type": resolved,
        }
