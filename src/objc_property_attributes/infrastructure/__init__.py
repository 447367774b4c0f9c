"""Infrastructure layer: configuration and logging."""

from .config import Config, get_config
from .logging import LoggerSetup, ProgressTracker, get_logger, log_timing

__all__ = ["Config", "LoggerSetup", "ProgressTracker", "get_config", "get_logger", "log_timing"]
