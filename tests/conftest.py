"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from objc_property_attributes.domain.models import TypeHandle
from objc_property_attributes.domain.repositories import DictTypeRegistry
from objc_property_attributes.domain.services import AttributeDecoder
from objc_property_attributes.domain.services.parsing import default_decoder
from objc_property_attributes.infrastructure.logging import LoggerSetup

# Environment variables read by the configuration layer
CONFIG_ENV_VARS = (
    "OBJC_ATTRIBUTES_FILE",
    "OBJC_KNOWN_TYPES",
    "OUTPUT_FORMAT",
    "VERBOSE",
    "LOG_DIR",
    "OBJC_TYPE_CACHE_SIZE",
    "OBJC_RESOLVE_TYPES",
    "OBJC_GC_MARKERS",
    "OBJC_GENERIC_OBJECT_NAMES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Run every test without configuration from the environment or a .env file.

    Each variable is set then deleted so monkeypatch restores it afterwards,
    including values a test loads from a .env file. The shared default
    decoder is rebuilt so it sees the cleaned environment.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    default_decoder.cache_clear()
    yield
    default_decoder.cache_clear()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Allow a test to initialize logging and undo it afterwards."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def known_types() -> dict[str, TypeHandle]:
    """Handles for the classes the test registry knows."""
    return {name: TypeHandle(name) for name in ("NSString", "NSArray", "NSObject")}


@pytest.fixture
def registry(known_types: dict[str, TypeHandle]) -> DictTypeRegistry:
    """In-memory registry knowing NSString, NSArray and NSObject."""
    return DictTypeRegistry(known_types)


@pytest.fixture
def decoder(registry: DictTypeRegistry) -> AttributeDecoder:
    """Decoder resolving class names against the test registry."""
    return AttributeDecoder(registry)
