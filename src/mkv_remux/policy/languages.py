"""Original-language resolution and language priority ordering."""

import logging
from collections.abc import Sequence

from mkv_remux.domain import StreamDescriptor
from mkv_remux.language import is_valid_language_code, languages_match

logger = logging.getLogger(__name__)


def resolve_original_language(
    override: str | None,
    streams: Sequence[StreamDescriptor],
    default_language: str,
) -> str:
    """Determine the original language of a file.

    Precedence:
    1. An explicit, non-empty override (a warning is logged if it is not a
       known ISO 639 code, but it is used regardless).
    2. The language tag of the first video stream, if set.
    3. ``default_language``, logging a warning.

    Args:
        override: Language supplied by the user, if any.
        streams: Streams of the probed file in source order.
        default_language: Fallback language.

    Returns:
        The resolved original language code.
    """
    if override and override.strip():
        override = override.strip()
        if not is_valid_language_code(override):
            logger.warning(
                "Unrecognised language code: %s, using it as given", override
            )
        return override

    video = next((s for s in streams if s.is_video), None)
    if video is not None and video.language:
        return video.language

    logger.warning(
        "Video language is not defined, using default language: %s",
        default_language,
    )
    return default_language


def build_language_priority(
    target_language: str,
    original_language: str,
    default_language: str,
) -> list[str]:
    """Build the ordered language list used for audio and subtitle selection.

    The target language always comes first, followed by the original language
    and the default language. A language already present in the list (under
    any ISO 639 spelling) is not added again.

    Examples:
        >>> build_language_priority("rus", "rus", "eng")
        ['rus', 'eng']
        >>> build_language_priority("rus", "jpn", "eng")
        ['rus', 'jpn', 'eng']
        >>> build_language_priority("rus", "eng", "eng")
        ['rus', 'eng']
    """
    languages: list[str] = []
    for language in (target_language, original_language, default_language):
        if not language:
            continue
        if any(languages_match(language, existing) for existing in languages):
            continue
        languages.append(language)
    return languages
