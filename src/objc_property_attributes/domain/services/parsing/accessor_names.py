#!/usr/bin/env python3

"""Default accessor selector names for properties."""


def selector_with_capitalized_key(prefix: str, key: str, suffix: str) -> str:
    """Build a selector name of the form ``<prefix><Key><suffix>``.

    Only the first character of ``key`` is upper-cased; the rest is kept as
    is, so ``URL`` stays ``URL`` and ``fooBar`` becomes ``FooBar``.

    Args:
        prefix: Selector prefix, e.g. "set" or "merge"
        key: Property name
        suffix: Selector suffix, e.g. ":" or "FromModel:"

    Returns:
        The selector name
    """
    return f"{prefix}{key[:1].upper()}{key[1:]}{suffix}"


def default_getter_name(property_name: str) -> str:
    """Getter name used when the declaration has no ``getter=`` attribute."""
    return property_name


def default_setter_name(property_name: str) -> str:
    """Setter name used when the declaration has no ``setter=`` attribute.

    Examples:
        - "name": "setName:"
        - "x": "setX:"
        - "URL": "setURL:"
    """
    return selector_with_capitalized_key("set", property_name, ":")
