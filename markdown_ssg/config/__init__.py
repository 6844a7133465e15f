"""Configuration for content discovery."""

from markdown_ssg.config.logging import configure_logging, get_logger
from markdown_ssg.config.models import (
    DEFAULT_ASSET_TYPES,
    DEFAULT_IGNORE_NAMES,
    DEFAULT_MARKDOWN_EXTENSIONS,
    ConfigError,
    DiscoveryConfig,
    load_config,
)

__all__ = [
    "DEFAULT_ASSET_TYPES",
    "DEFAULT_IGNORE_NAMES",
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "ConfigError",
    "DiscoveryConfig",
    "configure_logging",
    "get_logger",
    "load_config",
]
