"""Command construction for MKV Remux.

- RemuxCommand: Ordered ffmpeg argument list with shell/JSON rendering
- RemuxCommandBuilder: Stream-by-stream command assembly
- AudioCodecPolicy: Copy/transcode rules for audio streams
- build_remux_command: Render a StreamSelection into a RemuxCommand
"""

from mkv_remux.executor.ffmpeg_remux import (
    DEFAULT_COPY_AUDIO_CODECS,
    DEFAULT_FALLBACK_AUDIO_BITRATE,
    DEFAULT_FALLBACK_AUDIO_CODEC,
    AudioCodecPolicy,
    RemuxCommand,
    RemuxCommandBuilder,
    build_remux_command,
)

__all__ = [
    "DEFAULT_COPY_AUDIO_CODECS",
    "DEFAULT_FALLBACK_AUDIO_BITRATE",
    "DEFAULT_FALLBACK_AUDIO_CODEC",
    "AudioCodecPolicy",
    "RemuxCommand",
    "RemuxCommandBuilder",
    "build_remux_command",
]
