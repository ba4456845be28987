"""Domain models for MKV Remux.

These models describe container streams independently of the probing tool
that produced them.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class StreamType(Enum):
    """Kind of a stream within a media container."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    OTHER = "other"  # attachments, data streams, anything unrecognised


@dataclass(frozen=True)
class StreamDescriptor:
    """A single stream of a media container (domain model)."""

    index: int
    codec_name: str
    codec_type: StreamType
    channels: int = 0  # audio only, 0 for every other stream type
    language: str = ""  # ISO 639 tag as found in the container, may be empty

    @property
    def is_video(self) -> bool:
        return self.codec_type is StreamType.VIDEO

    @property
    def is_audio(self) -> bool:
        return self.codec_type is StreamType.AUDIO

    @property
    def is_subtitle(self) -> bool:
        return self.codec_type is StreamType.SUBTITLE


@dataclass
class ProbeResult:
    """Result of probing a media file."""

    file_path: Path
    container_format: str | None
    streams: list[StreamDescriptor]
    warnings: list[str] = field(default_factory=list)

    @property
    def primary_video_stream(self) -> StreamDescriptor | None:
        """Return the first video stream, or None if no video streams exist."""
        return next((s for s in self.streams if s.is_video), None)


@dataclass(frozen=True)
class StreamSelection:
    """Streams chosen for the output file, in output order.

    Attributes:
        video: The selected video stream, if the source has one.
        audio: One audio stream per matched language, in priority order.
        subtitles: One subtitle stream per matched language, in priority order.
        original_language: Resolved language of the video stream.
        languages: Language priority list the selection was made against.
    """

    video: StreamDescriptor | None
    audio: tuple[StreamDescriptor, ...]
    subtitles: tuple[StreamDescriptor, ...]
    original_language: str
    languages: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True if no stream at all was selected."""
        return self.video is None and not self.audio and not self.subtitles

    @property
    def stream_count(self) -> int:
        return (1 if self.video is not None else 0) + len(self.audio) + len(
            self.subtitles
        )
