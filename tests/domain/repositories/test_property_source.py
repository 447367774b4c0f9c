#!/usr/bin/env python3

"""Unit tests for property sources and decode_property."""

from pathlib import Path

import pytest

from objc_property_attributes.domain.models import (
    MalformedAttributesError,
    MemoryPolicy,
    TypeHandle,
)
from objc_property_attributes.domain.repositories import (
    DictTypeRegistry,
    PropertyListSource,
    decode_property,
)


@pytest.fixture
def attributes_file(tmp_path: Path) -> Path:
    """File with two properties, a comment and a blank line."""
    path = tmp_path / "properties.tsv"
    path.write_text(
        "# name\tattributes\n"
        'name\tT@"NSString",C,N,V_name\n'
        "\n"
        "count\tTi,R\n",
        encoding="utf-8",
    )
    return path


class TestPropertyListSource:
    """Test the in-memory property source."""

    @pytest.mark.unit
    def test_handles_and_lookups(self) -> None:
        source = PropertyListSource([("name", 'T@"NSString",C'), ("count", b"Ti,R")])

        assert list(source.handles()) == [0, 1]
        assert len(source) == 2
        assert source.get_property_name(0) == "name"
        assert source.get_raw_attribute_string(0) == b'T@"NSString",C'
        assert source.get_raw_attribute_string(1) == b"Ti,R"

    @pytest.mark.unit
    def test_from_file(self, attributes_file: Path) -> None:
        source = PropertyListSource.from_file(attributes_file)

        assert len(source) == 2
        assert source.get_property_name(0) == "name"
        assert source.get_raw_attribute_string(0) == b'T@"NSString",C,N,V_name'
        assert source.get_property_name(1) == "count"

    @pytest.mark.unit
    def test_from_file_rejects_line_without_tab(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.tsv"
        path.write_text("name Ti,N\n", encoding="utf-8")

        with pytest.raises(ValueError, match="broken.tsv:1"):
            PropertyListSource.from_file(path)

    @pytest.mark.unit
    def test_from_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            PropertyListSource.from_file(tmp_path / "missing.tsv")


class TestDecodeProperty:
    """Test fetching and decoding through a source."""

    @pytest.mark.unit
    def test_decode_property(self, registry: DictTypeRegistry) -> None:
        source = PropertyListSource([("name", 'T@"NSString",C,N,V_name')])

        attributes = decode_property(source, 0, registry)

        assert attributes.memory_policy == MemoryPolicy.COPY
        assert attributes.setter_name == "setName:"
        assert attributes.resolved_object_type == TypeHandle("NSString")

    @pytest.mark.unit
    def test_decode_property_malformed(self) -> None:
        source = PropertyListSource([("broken", "N,V_broken")])

        with pytest.raises(MalformedAttributesError):
            decode_property(source, 0)
