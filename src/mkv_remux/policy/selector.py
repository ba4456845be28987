"""Stream selection for the remuxed output.

Every category picks the first matching stream in source order:
- video: the first video stream,
- audio: per language, the first audio stream in that language whose channel
  count does not exceed the configured maximum,
- subtitles: per language, the first subtitle stream in that language.

A language with no matching stream is skipped for that category.
"""

import logging
from collections.abc import Callable, Sequence

from mkv_remux.domain import StreamDescriptor, StreamSelection
from mkv_remux.language import languages_match

logger = logging.getLogger(__name__)

DEFAULT_MAX_AUDIO_CHANNELS = 6

StreamPredicate = Callable[[StreamDescriptor], bool]


def _first_match(
    streams: Sequence[StreamDescriptor],
    predicate: StreamPredicate,
) -> StreamDescriptor | None:
    return next((s for s in streams if predicate(s)), None)


def _select_per_language(
    streams: Sequence[StreamDescriptor],
    languages: Sequence[str],
    predicate: StreamPredicate,
    kind: str,
) -> tuple[StreamDescriptor, ...]:
    """Pick at most one stream per language, in language priority order."""
    selected: list[StreamDescriptor] = []
    for language in languages:
        stream = _first_match(
            streams,
            lambda s, lang=language: predicate(s)
            and languages_match(s.language, lang)
            and s not in selected,
        )
        if stream is None:
            logger.debug("No %s stream for language '%s'", kind, language)
            continue
        logger.debug(
            "Selected %s stream %d (%s) for language '%s'",
            kind,
            stream.index,
            stream.codec_name,
            language,
        )
        selected.append(stream)
    return tuple(selected)


def select_video_stream(
    streams: Sequence[StreamDescriptor],
) -> StreamDescriptor | None:
    """Return the first video stream in source order."""
    return _first_match(streams, lambda s: s.is_video)


def select_audio_streams(
    streams: Sequence[StreamDescriptor],
    languages: Sequence[str],
    max_channels: int = DEFAULT_MAX_AUDIO_CHANNELS,
) -> tuple[StreamDescriptor, ...]:
    """Return one audio stream per language, skipping streams over max_channels."""
    return _select_per_language(
        streams,
        languages,
        lambda s: s.is_audio and s.channels <= max_channels,
        "audio",
    )


def select_subtitle_streams(
    streams: Sequence[StreamDescriptor],
    languages: Sequence[str],
) -> tuple[StreamDescriptor, ...]:
    """Return one subtitle stream per language."""
    return _select_per_language(
        streams, languages, lambda s: s.is_subtitle, "subtitle"
    )


def select_streams(
    streams: Sequence[StreamDescriptor],
    languages: Sequence[str],
    original_language: str,
    max_audio_channels: int = DEFAULT_MAX_AUDIO_CHANNELS,
) -> StreamSelection:
    """Select the video, audio and subtitle streams for the output.

    Args:
        streams: Streams of the probed file in source order.
        languages: Language priority list.
        original_language: Resolved language of the video stream.
        max_audio_channels: Audio streams with more channels are ignored.

    Returns:
        StreamSelection in output order.
    """
    video = select_video_stream(streams)
    if video is None:
        logger.warning("No video stream found")

    return StreamSelection(
        video=video,
        audio=select_audio_streams(streams, languages, max_audio_channels),
        subtitles=select_subtitle_streams(streams, languages),
        original_language=original_language,
        languages=tuple(languages),
    )
