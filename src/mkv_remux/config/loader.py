"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed in as a ConfigSource)
2. Environment variables (MKV_REMUX_*)
3. Config file (~/.mkv-remux/config.toml)
4. Default values

Environment variables:
- MKV_REMUX_CONFIG_PATH: Path to config file (overrides default location)
- MKV_REMUX_TARGET_LANGUAGE: Preferred audio/subtitle language
- MKV_REMUX_DEFAULT_LANGUAGE: Fallback language
- MKV_REMUX_MAX_AUDIO_CHANNELS: Highest selectable audio channel count
- MKV_REMUX_COPY_AUDIO_CODECS: Comma-separated audio codecs to stream-copy
- MKV_REMUX_FALLBACK_AUDIO_CODEC: Codec for all other audio
- MKV_REMUX_FALLBACK_AUDIO_BITRATE: Bitrate for transcoded audio
- MKV_REMUX_FFMPEG_PATH: ffmpeg executable used in the generated command
- MKV_REMUX_FFPROBE_PATH: Path to ffprobe executable
- MKV_REMUX_LOG_LEVEL / MKV_REMUX_LOG_FORMAT / MKV_REMUX_LOG_FILE: Logging
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mkv_remux.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from mkv_remux.config.env import ENV_PREFIX, EnvReader
from mkv_remux.config.models import RemuxConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".mkv-remux"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""

    pass


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path.

    Can be overridden by the MKV_REMUX_CONFIG_PATH environment variable.
    """
    env_path = EnvReader(env).get_path(f"{ENV_PREFIX}CONFIG_PATH")
    return env_path if env_path is not None else DEFAULT_CONFIG_FILE


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e


def load_config(
    config_path: Path | None = None,
    cli_source: ConfigSource | None = None,
    env: Mapping[str, str] | None = None,
) -> RemuxConfig:
    """Load the effective configuration.

    Args:
        config_path: Explicit config file. If None, uses the default location.
        cli_source: Values given on the command line.
        env: Environment mapping to read instead of os.environ.

    Returns:
        The merged RemuxConfig.

    Raises:
        ConfigError: If the config file is unparseable or a value is invalid.
    """
    path = config_path if config_path is not None else get_default_config_path(env)
    file_config = load_config_file(path)

    builder = ConfigBuilder()
    try:
        builder.apply(source_from_file(file_config))
    except (AttributeError, TypeError) as e:
        # A section that is not a table, e.g. `languages = "rus"`
        raise ConfigError(f"Invalid config layout in {path}: {e}") from e
    builder.apply(source_from_env(EnvReader(env)))
    if cli_source is not None:
        builder.apply(cli_source)

    try:
        return builder.build()
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
