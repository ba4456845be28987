"""Configuration module for MKV Remux.

- RemuxConfig and its section models
- ConfigSource / ConfigBuilder for layered configuration
- load_config: defaults < config file < environment < CLI
"""

from mkv_remux.config.builder import ConfigBuilder, ConfigSource
from mkv_remux.config.env import EnvReader
from mkv_remux.config.loader import (
    ConfigError,
    get_default_config_path,
    load_config,
    load_config_file,
)
from mkv_remux.config.models import (
    AudioConfig,
    LanguageConfig,
    LoggingConfig,
    RemuxConfig,
    ToolPathsConfig,
)

__all__ = [
    "AudioConfig",
    "ConfigBuilder",
    "ConfigError",
    "ConfigSource",
    "EnvReader",
    "LanguageConfig",
    "LoggingConfig",
    "RemuxConfig",
    "ToolPathsConfig",
    "get_default_config_path",
    "load_config",
    "load_config_file",
]
