"""Selection policy for MKV Remux.

- resolve_original_language: Override, video tag, or default language
- build_language_priority: Ordered, de-duplicated language list
- select_streams: Video/audio/subtitle selection against that list
"""

from mkv_remux.policy.languages import (
    build_language_priority,
    resolve_original_language,
)
from mkv_remux.policy.selector import (
    DEFAULT_MAX_AUDIO_CHANNELS,
    select_audio_streams,
    select_streams,
    select_subtitle_streams,
    select_video_stream,
)

__all__ = [
    "DEFAULT_MAX_AUDIO_CHANNELS",
    "build_language_priority",
    "resolve_original_language",
    "select_audio_streams",
    "select_streams",
    "select_subtitle_streams",
    "select_video_stream",
]
