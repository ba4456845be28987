"""Configuration data models.

This module defines dataclasses for MKV Remux configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

_VALID_LOG_LEVELS = ("debug", "info", "warning", "error")
_VALID_LOG_FORMATS = ("text", "json")


@dataclass
class LanguageConfig:
    """Languages used to rank audio and subtitle streams."""

    target: str = "rus"
    """Preferred language, always ranked first."""

    default: str = "eng"
    """Fallback language, also used when the original language is unknown."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("target", "default"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} language must be a non-empty string")
            setattr(self, name, value.strip())


@dataclass
class AudioConfig:
    """Audio stream selection and encoding rules."""

    max_channels: int = 6
    """Audio streams with more channels are never selected."""

    copy_codecs: tuple[str, ...] = ("ac3", "eac3", "aac")
    """Codecs that are stream-copied; everything else is transcoded."""

    fallback_codec: str = "ac3"
    fallback_bitrate: str = "640k"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if (
            not isinstance(self.max_channels, int)
            or isinstance(self.max_channels, bool)
            or self.max_channels < 1
        ):
            raise ValueError(
                f"max_channels must be a positive integer, got {self.max_channels!r}"
            )
        self.copy_codecs = tuple(
            str(c).strip().lower() for c in self.copy_codecs if str(c).strip()
        )
        if not self.fallback_codec:
            raise ValueError("fallback_codec must not be empty")
        if not self.fallback_bitrate:
            raise ValueError("fallback_bitrate must not be empty")


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    All paths are optional. ffprobe is looked up in PATH, and the generated
    command calls plain ``ffmpeg``.
    """

    ffmpeg: Path | None = None
    ffprobe: Path | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging.

    Log output goes to stderr so that stdout carries only the command.
    """

    level: str = "warning"
    format: str = "text"
    file: Path | None = None
    max_bytes: int = 10_485_760  # 10 MiB
    backup_count: int = 3

    def __post_init__(self) -> None:
        """Validate configuration."""
        self.level = str(self.level).casefold()
        self.format = str(self.format).casefold()
        if self.level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {_VALID_LOG_LEVELS}, got {self.level}"
            )
        if self.format not in _VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {_VALID_LOG_FORMATS}, got {self.format}"
            )


@dataclass
class RemuxConfig:
    """Main configuration container for MKV Remux."""

    languages: LanguageConfig = field(default_factory=LanguageConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
