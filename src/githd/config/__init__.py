"""Configuration loading, schema, and defaults."""

from githd.config.loader import ConfigError, load_config
from githd.config.schema import GitConfig, GitHdConfig

__all__ = [
    "ConfigError",
    "GitConfig",
    "GitHdConfig",
    "load_config",
]
