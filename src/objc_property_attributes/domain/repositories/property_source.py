#!/usr/bin/env python3

"""Sources of raw property attribute strings."""

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ...infrastructure.logging import get_logger
from ..models.property_attributes import PropertyAttributes
from ..services.parsing import decode

if TYPE_CHECKING:
    from .type_registry import TypeRegistry

logger = get_logger(__name__)

FIELD_SEPARATOR = "\t"
COMMENT_PREFIX = "#"


class PropertySource(Protocol):
    """Supplies the name and raw attribute string of a property handle."""

    def get_raw_attribute_string(self, property_handle: Any) -> bytes: ...

    def get_property_name(self, property_handle: Any) -> str: ...


class PropertyListSource:
    """Property source over an in-memory list of (name, attributes) pairs.

    Handles are indexes into the list.
    """

    def __init__(self, entries: Sequence[tuple[str, bytes | str]]):
        self._entries = list(entries)

    @classmethod
    def from_file(cls, path: Path) -> "PropertyListSource":
        """Load entries from a text file.

        Each line is ``<name><TAB><attributes>``. Blank lines and lines
        starting with ``#`` are skipped.

        Args:
            path: File to read

        Returns:
            Source with one entry per property line

        Raises:
            ValueError: If a property line has no tab separator or no name
        """
        entries = []
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                line = line.rstrip("\r\n")
                if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
                    continue

                name, separator, attributes = line.partition(FIELD_SEPARATOR)
                name = name.strip()
                if not separator or not name:
                    raise ValueError(
                        f"{path}:{line_number}: expected '<name><TAB><attributes>', got {line!r}"
                    )
                entries.append((name, attributes.strip()))

        logger.debug(f"Loaded {len(entries)} properties from {path}")
        return cls(entries)

    def handles(self) -> Iterator[int]:
        """Iterate over all property handles in order."""
        return iter(range(len(self._entries)))

    def get_raw_attribute_string(self, property_handle: int) -> bytes:
        attributes = self._entries[property_handle][1]
        if isinstance(attributes, str):
            return attributes.encode("utf-8")
        return attributes

    def get_property_name(self, property_handle: int) -> str:
        return self._entries[property_handle][0]

    def __len__(self) -> int:
        return len(self._entries)


def decode_property(
    source: PropertySource,
    property_handle: Any,
    registry: "TypeRegistry | None" = None,
) -> PropertyAttributes:
    """Fetch a property's attribute string from a source and decode it.

    Args:
        source: Source supplying the attribute string and name
        property_handle: Handle identifying the property within the source
        registry: Registry used to resolve object class names

    Returns:
        Decoded attributes

    Raises:
        MalformedAttributesError: If the attribute string is malformed
    """
    raw_attributes = source.get_raw_attribute_string(property_handle)
    property_name = source.get_property_name(property_handle)
    return decode(raw_attributes, property_name, registry)
