"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building RemuxConfig by composing
multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from mkv_remux.config.env import ENV_PREFIX, EnvReader
from mkv_remux.config.models import (
    AudioConfig,
    LanguageConfig,
    LoggingConfig,
    RemuxConfig,
    ToolPathsConfig,
)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Languages
    target_language: str | None = None
    default_language: str | None = None

    # Audio
    max_audio_channels: int | None = None
    copy_audio_codecs: list[str] | None = None
    fallback_audio_codec: str | None = None
    fallback_audio_bitrate: str | None = None

    # Tool paths
    ffmpeg_path: Path | None = None
    ffprobe_path: Path | None = None

    # Logging
    logging_level: str | None = None
    logging_format: str | None = None
    logging_file: Path | None = None


class ConfigBuilder:
    """Builds RemuxConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(EnvReader()))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource) -> None:
        """Apply a configuration source, overriding existing values."""
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value

    def _kwargs(self, mapping: dict[str, str]) -> dict[str, Any]:
        """Collect set values for a model, keyed by model field name."""
        return {
            model_field: self._values[source_field]
            for source_field, model_field in mapping.items()
            if source_field in self._values
        }

    def build(self) -> RemuxConfig:
        """Build the final RemuxConfig with defaults for unset values.

        Raises:
            ValueError: If a value fails model validation.
        """
        audio_kwargs = self._kwargs(
            {
                "max_audio_channels": "max_channels",
                "fallback_audio_codec": "fallback_codec",
                "fallback_audio_bitrate": "fallback_bitrate",
            }
        )
        if "copy_audio_codecs" in self._values:
            audio_kwargs["copy_codecs"] = tuple(self._values["copy_audio_codecs"])

        return RemuxConfig(
            languages=LanguageConfig(
                **self._kwargs(
                    {"target_language": "target", "default_language": "default"}
                )
            ),
            audio=AudioConfig(**audio_kwargs),
            tools=ToolPathsConfig(
                **self._kwargs({"ffmpeg_path": "ffmpeg", "ffprobe_path": "ffprobe"})
            ),
            logging=LoggingConfig(
                **self._kwargs(
                    {
                        "logging_level": "level",
                        "logging_format": "format",
                        "logging_file": "file",
                    }
                )
            ),
        )


def _path_or_none(value: Any) -> Path | None:
    return Path(value).expanduser() if value else None


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create a ConfigSource from a parsed TOML config file.

    Expected layout::

        [languages]
        target = "rus"
        default = "eng"

        [audio]
        max_channels = 6
        copy_codecs = ["ac3", "eac3", "aac"]
        fallback_codec = "ac3"
        fallback_bitrate = "640k"

        [tools]
        ffmpeg = "/usr/bin/ffmpeg"
        ffprobe = "/usr/bin/ffprobe"

        [logging]
        level = "info"
        format = "json"
        file = "~/.mkv-remux/mkv-remux.log"
    """
    languages = file_config.get("languages", {})
    audio = file_config.get("audio", {})
    tools = file_config.get("tools", {})
    logging_conf = file_config.get("logging", {})

    copy_codecs = audio.get("copy_codecs")
    if isinstance(copy_codecs, str):
        copy_codecs = [c.strip() for c in copy_codecs.split(",")]

    return ConfigSource(
        target_language=languages.get("target"),
        default_language=languages.get("default"),
        max_audio_channels=audio.get("max_channels"),
        copy_audio_codecs=copy_codecs,
        fallback_audio_codec=audio.get("fallback_codec"),
        fallback_audio_bitrate=audio.get("fallback_bitrate"),
        ffmpeg_path=_path_or_none(tools.get("ffmpeg")),
        ffprobe_path=_path_or_none(tools.get("ffprobe")),
        logging_level=logging_conf.get("level"),
        logging_format=logging_conf.get("format"),
        logging_file=_path_or_none(logging_conf.get("file")),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create a ConfigSource from MKV_REMUX_* environment variables."""
    return ConfigSource(
        target_language=reader.get_str(f"{ENV_PREFIX}TARGET_LANGUAGE"),
        default_language=reader.get_str(f"{ENV_PREFIX}DEFAULT_LANGUAGE"),
        max_audio_channels=reader.get_int(f"{ENV_PREFIX}MAX_AUDIO_CHANNELS"),
        copy_audio_codecs=reader.get_list(f"{ENV_PREFIX}COPY_AUDIO_CODECS"),
        fallback_audio_codec=reader.get_str(f"{ENV_PREFIX}FALLBACK_AUDIO_CODEC"),
        fallback_audio_bitrate=reader.get_str(f"{ENV_PREFIX}FALLBACK_AUDIO_BITRATE"),
        ffmpeg_path=reader.get_path(f"{ENV_PREFIX}FFMPEG_PATH"),
        ffprobe_path=reader.get_path(f"{ENV_PREFIX}FFPROBE_PATH"),
        logging_level=reader.get_str(f"{ENV_PREFIX}LOG_LEVEL"),
        logging_format=reader.get_str(f"{ENV_PREFIX}LOG_FORMAT"),
        logging_file=reader.get_path(f"{ENV_PREFIX}LOG_FILE"),
    )
