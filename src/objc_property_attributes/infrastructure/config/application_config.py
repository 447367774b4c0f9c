"""Configuration management for the attribute decoder CLI."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

OUTPUT_FORMATS = ("text", "json", "declaration")


@dataclass
class Config:
    """Configuration for the attribute decoder CLI."""

    attributes_file: Optional[Path] = None
    known_types: list[str] = field(default_factory=list)
    output_format: str = "text"
    verbose: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        attributes_file_str = os.getenv("OBJC_ATTRIBUTES_FILE")
        known_types_str = os.getenv("OBJC_KNOWN_TYPES", "")
        output_format = os.getenv("OUTPUT_FORMAT", "text").lower()
        verbose_str = os.getenv("VERBOSE", "false").lower()
        log_dir_str = os.getenv("LOG_DIR")

        return cls(
            attributes_file=Path(attributes_file_str) if attributes_file_str else None,
            known_types=parse_type_names(known_types_str),
            output_format=output_format,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        attributes_file: Optional[Path] = None,
        known_types: Optional[list[str]] = None,
        output_format: Optional[str] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            attributes_file: File of properties to decode (overrides env)
            known_types: Class names the type registry resolves (overrides env)
            output_format: One of OUTPUT_FORMATS (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if attributes_file is not None:
            config.attributes_file = attributes_file
        if known_types is not None:
            config.known_types = known_types
        if output_format is not None:
            config.output_format = output_format
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

        if self.attributes_file is not None:
            if not self.attributes_file.exists():
                raise ValueError(f"Attributes file not found: {self.attributes_file}")
            if not self.attributes_file.is_file():
                raise ValueError(f"Not a file: {self.attributes_file}")

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured and missing."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)


def parse_type_names(value: str) -> list[str]:
    """Split a comma-separated list of class names, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]
