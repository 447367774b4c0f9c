#!/usr/bin/env python3

"""Reconstruction of ``@property`` declarations from decoded attributes.

Given a PropertyAttributes and the property's name, produces the declaration
a header would contain, e.g.::

    @property (nonatomic, copy) NSString *name;

Accessor attributes are only emitted when they differ from the names the
compiler would infer, so decoding and rendering a plain declaration gives
back the same declaration.
"""

from ...models.property_attributes import MemoryPolicy, PropertyAttributes
from ..parsing.accessor_names import default_getter_name, default_setter_name
from ..parsing.type_encoding import describe_type_encoding


def render_declaration(attributes: PropertyAttributes, property_name: str) -> str:
    """Render a property declaration.

    Args:
        attributes: Decoded attributes of the property
        property_name: Declared name of the property

    Returns:
        Single-line ``@property`` declaration, with a trailing comment when the
        property is dynamic or names its backing storage
    """
    qualifiers = _collect_qualifiers(attributes, property_name)
    type_name = describe_type_encoding(attributes.declared_type_encoding)
    separator = "" if type_name.endswith("*") else " "

    declaration = "@property "
    if qualifiers:
        declaration += f"({', '.join(qualifiers)}) "
    declaration += f"{type_name}{separator}{property_name};"

    notes = []
    if attributes.is_dynamic:
        notes.append("@dynamic")
    if attributes.backing_storage_name is not None:
        notes.append(f"ivar: {attributes.backing_storage_name}")
    if notes:
        declaration += f" // {', '.join(notes)}"

    return declaration


def _collect_qualifiers(attributes: PropertyAttributes, property_name: str) -> list[str]:
    qualifiers = []

    if attributes.is_nonatomic:
        qualifiers.append("nonatomic")
    if attributes.is_readonly:
        qualifiers.append("readonly")

    # Assign is implicit
    if attributes.is_weak:
        qualifiers.append("weak")
    elif attributes.memory_policy == MemoryPolicy.COPY:
        qualifiers.append("copy")
    elif attributes.memory_policy == MemoryPolicy.RETAIN:
        qualifiers.append("strong")

    if attributes.getter_name != default_getter_name(property_name):
        qualifiers.append(f"getter={attributes.getter_name}")
    if attributes.setter_name != default_setter_name(property_name):
        qualifiers.append(f"setter={attributes.setter_name}")

    return qualifiers
