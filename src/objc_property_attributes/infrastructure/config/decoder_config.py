#!/usr/bin/env python3

"""Configuration for the attribute decoder and type registries."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Maximum number of type names remembered by CachingTypeRegistry
    "TYPE_CACHE_SIZE": 1024,

    # Feature flags
    "RESOLVE_TYPES": True,

    # Token classification
    "GC_MARKERS": frozenset({"P"}),
    "GENERIC_OBJECT_NAMES": frozenset({"id"}),
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Each key can be overridden by an ``OBJC_<KEY>`` environment variable.
    Set-valued keys take a comma-separated list.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"OBJC_{key}")
        if env_value is not None:
            # Convert to appropriate type
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            elif isinstance(config[key], frozenset):
                config[key] = frozenset(
                    item.strip() for item in env_value.split(",") if item.strip()
                )
            else:
                config[key] = env_value

    return config
