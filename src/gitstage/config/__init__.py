"""Configuration loading, schema, and defaults."""

from gitstage.config.loader import ConfigError, load_config
from gitstage.config.schema import GitStageConfig, KeysConfig, LogConfig, UIConfig

__all__ = [
    "ConfigError",
    "GitStageConfig",
    "KeysConfig",
    "LogConfig",
    "UIConfig",
    "load_config",
]
