"""Infrastructure configuration module."""

from .application_config import OUTPUT_FORMATS, Config
from .decoder_config import DEFAULT_CONFIG, get_config

__all__ = ["Config", "DEFAULT_CONFIG", "OUTPUT_FORMATS", "get_config"]
