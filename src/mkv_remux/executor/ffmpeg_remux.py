"""FFmpeg remux command construction.

Builds the ffmpeg invocation that copies the selected streams into a new
container, transcoding audio that the target players cannot decode, dropping
chapters and global metadata, and tagging every stream with its language.

The command is only rendered, never run: the caller prints it.

Example:
    >>> cmd = build_remux_command(selection, Path("in.mkv"), Path("out.mkv"))
    >>> print(cmd.to_shell())
"""

import json
import shlex
from dataclasses import dataclass, field
from pathlib import Path

from mkv_remux.domain import StreamDescriptor, StreamSelection

DEFAULT_COPY_AUDIO_CODECS: frozenset[str] = frozenset({"ac3", "eac3", "aac"})
DEFAULT_FALLBACK_AUDIO_CODEC = "ac3"
DEFAULT_FALLBACK_AUDIO_BITRATE = "640k"


@dataclass(frozen=True)
class AudioCodecPolicy:
    """How audio streams are encoded in the output.

    Attributes:
        copy_codecs: Source codecs that are stream-copied as-is.
        fallback_codec: Codec for every other audio stream.
        fallback_bitrate: Bitrate for transcoded audio streams.
    """

    copy_codecs: frozenset[str] = DEFAULT_COPY_AUDIO_CODECS
    fallback_codec: str = DEFAULT_FALLBACK_AUDIO_CODEC
    fallback_bitrate: str = DEFAULT_FALLBACK_AUDIO_BITRATE

    def should_copy(self, codec_name: str) -> bool:
        return codec_name.lower() in self.copy_codecs


@dataclass
class RemuxCommand:
    """An ffmpeg command line as an ordered argument list."""

    args: list[str] = field(default_factory=list)

    def to_shell(self) -> str:
        """Render as a single POSIX shell command, every token escaped."""
        return shlex.join(self.args)

    def to_json(self) -> str:
        """Render as a JSON array of arguments."""
        return json.dumps(self.args)

    def __str__(self) -> str:
        return self.to_shell()


class RemuxCommandBuilder:
    """Assembles a RemuxCommand stream by stream.

    Output stream indices are assigned in the order streams are added,
    starting at 0, independent of their index in the source file. A builder
    is meant for a single command.
    """

    def __init__(
        self,
        source: str | Path,
        ffmpeg_path: str | Path = "ffmpeg",
        audio_policy: AudioCodecPolicy | None = None,
    ) -> None:
        self._audio_policy = audio_policy or AudioCodecPolicy()
        self._next_index = 0
        self._args: list[str] = [
            str(ffmpeg_path),
            # generate missing timestamps
            "-fflags",
            "+genpts",
            "-i",
            str(source),
            # drop chapters and global metadata
            "-map_chapters",
            "-1",
            "-map_metadata",
            "-1",
            # no subtitle stream is flagged default
            "-default_mode",
            "infer_no_subs",
        ]

    @property
    def stream_count(self) -> int:
        """Number of streams mapped so far."""
        return self._next_index

    def _map(
        self,
        stream: StreamDescriptor,
        language: str,
        codec: str = "copy",
        bitrate: str | None = None,
    ) -> None:
        out = self._next_index
        self._args.extend(["-map", f"0:{stream.index}", f"-c:{out}", codec])
        if bitrate:
            self._args.extend([f"-b:{out}", bitrate])
        self._args.extend([f"-metadata:s:{out}", f"language={language}"])
        self._next_index += 1

    def add_video(
        self, stream: StreamDescriptor, language: str
    ) -> "RemuxCommandBuilder":
        """Copy a video stream, tagged with the original language."""
        self._map(stream, language)
        return self

    def add_audio(self, stream: StreamDescriptor) -> "RemuxCommandBuilder":
        """Copy or transcode an audio stream, tagged with its own language."""
        policy = self._audio_policy
        if policy.should_copy(stream.codec_name):
            self._map(stream, stream.language)
        else:
            self._map(
                stream,
                stream.language,
                codec=policy.fallback_codec,
                bitrate=policy.fallback_bitrate,
            )
        return self

    def add_subtitle(self, stream: StreamDescriptor) -> "RemuxCommandBuilder":
        """Copy a subtitle stream, tagged with its own language."""
        self._map(stream, stream.language)
        return self

    def build(self, target: str | Path) -> RemuxCommand:
        """Finish the command with the output file."""
        return RemuxCommand(args=[*self._args, str(target)])


def build_remux_command(
    selection: StreamSelection,
    source: str | Path,
    target: str | Path,
    ffmpeg_path: str | Path = "ffmpeg",
    audio_policy: AudioCodecPolicy | None = None,
) -> RemuxCommand:
    """Render a stream selection into an ffmpeg remux command.

    Streams are mapped video first, then audio, then subtitles, each in the
    selection's order.

    Args:
        selection: Streams chosen for the output.
        source: Input file.
        target: Output file.
        ffmpeg_path: ffmpeg executable placed at the head of the command.
        audio_policy: Copy/transcode rules for audio. Defaults to copying
            ac3/eac3/aac and transcoding everything else to ac3 at 640k.

    Returns:
        The assembled RemuxCommand.
    """
    builder = RemuxCommandBuilder(source, ffmpeg_path, audio_policy)

    if selection.video is not None:
        builder.add_video(selection.video, selection.original_language)
    for stream in selection.audio:
        builder.add_audio(stream)
    for stream in selection.subtitles:
        builder.add_subtitle(stream)

    return builder.build(target)
