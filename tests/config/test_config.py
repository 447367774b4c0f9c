"""Tests for configuration management functionality."""

from pathlib import Path

import pytest

from objc_property_attributes.infrastructure.config import DEFAULT_CONFIG, Config, get_config


@pytest.mark.unit
def test_config_defaults() -> None:
    """Test configuration with nothing set in the environment."""
    config = Config.from_env()

    assert config.attributes_file is None
    assert config.known_types == []
    assert config.output_format == "text"
    assert config.verbose is False
    assert config.log_dir is None


@pytest.mark.unit
def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test configuration loading from environment variables."""
    monkeypatch.setenv("OBJC_ATTRIBUTES_FILE", "properties.tsv")
    monkeypatch.setenv("OBJC_KNOWN_TYPES", "NSString, NSArray,,")
    monkeypatch.setenv("OUTPUT_FORMAT", "JSON")
    monkeypatch.setenv("VERBOSE", "yes")
    monkeypatch.setenv("LOG_DIR", "logs")

    config = Config.from_env()

    assert config.attributes_file == Path("properties.tsv")
    assert config.known_types == ["NSString", "NSArray"]
    assert config.output_format == "json"
    assert config.verbose is True
    assert config.log_dir == Path("logs")


@pytest.mark.unit
def test_config_env_file_loading(tmp_path: Path) -> None:
    """Test loading configuration from a .env file."""
    env_path = tmp_path / ".env"
    env_path.write_text("OBJC_KNOWN_TYPES=NSURL,NSDate\nOUTPUT_FORMAT=declaration\n")

    config = Config.from_env(env_path)

    assert config.known_types == ["NSURL", "NSDate"]
    assert config.output_format == "declaration"


@pytest.mark.unit
def test_config_from_args_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTPUT_FORMAT", "json")
    monkeypatch.setenv("OBJC_KNOWN_TYPES", "NSString")

    config = Config.from_args(output_format="declaration", verbose=True)

    assert config.output_format == "declaration"
    assert config.verbose is True
    assert config.known_types == ["NSString"]


@pytest.mark.unit
def test_config_validation_accepts_defaults() -> None:
    Config().validate()


@pytest.mark.unit
def test_config_validation_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown output format"):
        Config(output_format="xml").validate()


@pytest.mark.unit
def test_config_validation_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Attributes file not found"):
        Config(attributes_file=tmp_path / "missing.tsv").validate()


@pytest.mark.unit
def test_config_validation_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Not a file"):
        Config(attributes_file=tmp_path).validate()


@pytest.mark.unit
def test_ensure_log_dir(tmp_path: Path) -> None:
    config = Config(log_dir=tmp_path / "nested" / "logs")
    config.ensure_log_dir()

    assert (tmp_path / "nested" / "logs").is_dir()


@pytest.mark.unit
def test_decoder_config_defaults() -> None:
    config = get_config()

    assert config == DEFAULT_CONFIG
    assert config["GC_MARKERS"] == frozenset({"P"})
    assert config["GENERIC_OBJECT_NAMES"] == frozenset({"id"})


@pytest.mark.unit
def test_decoder_config_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJC_TYPE_CACHE_SIZE", "16")
    monkeypatch.setenv("OBJC_RESOLVE_TYPES", "off")
    monkeypatch.setenv("OBJC_GENERIC_OBJECT_NAMES", "id, NSObject")

    config = get_config()

    assert config["TYPE_CACHE_SIZE"] == 16
    assert config["RESOLVE_TYPES"] is False
    assert config["GENERIC_OBJECT_NAMES"] == frozenset({"id", "NSObject"})


@pytest.mark.unit
def test_decoder_config_ignores_invalid_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJC_TYPE_CACHE_SIZE", "lots")

    assert get_config()["TYPE_CACHE_SIZE"] == DEFAULT_CONFIG["TYPE_CACHE_SIZE"]


@pytest.mark.unit
def test_get_config_returns_copy() -> None:
    config = get_config()
    config["TYPE_CACHE_SIZE"] = 1

    assert DEFAULT_CONFIG["TYPE_CACHE_SIZE"] != 1
