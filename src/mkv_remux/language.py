"""Language code normalization and comparison utilities.

Stream language tags in the wild come in several ISO 639 flavours:
- ISO 639-1 (2-letter codes like "en", "ru")
- ISO 639-2/B (3-letter bibliographic codes like "eng", "ger")
- ISO 639-2/T (3-letter terminological codes like "eng", "deu")

Matroska and FFmpeg use ISO 639-2/B, so codes are compared in that form.
Lookups are backed by the ISO 639-3 tables shipped with pycountry.
"""

import logging
from functools import lru_cache

import pycountry

logger = logging.getLogger(__name__)

# Codes with no linguistic meaning that pass through unchanged
_SPECIAL_CODES: frozenset[str] = frozenset({"und", "mis", "mul", "zxx"})


@lru_cache(maxsize=256)
def _lookup(code: str):
    """Find the pycountry language record for a 2- or 3-letter code."""
    if len(code) == 2:
        return pycountry.languages.get(alpha_2=code)
    if len(code) == 3:
        return pycountry.languages.get(alpha_3=code) or pycountry.languages.get(
            bibliographic=code
        )
    return None


def normalize_language(code: str | None) -> str:
    """Normalize a language code to ISO 639-2/B.

    Args:
        code: Language code in any ISO 639 form. Surrounding whitespace and
            case are ignored.

    Returns:
        The ISO 639-2/B code, the lowercased input if the code is unknown,
        or an empty string for None/empty input.

    Examples:
        >>> normalize_language("ru")
        'rus'
        >>> normalize_language("deu")
        'ger'
        >>> normalize_language("ENG")
        'eng'
    """
    if not code:
        return ""

    code = code.strip().lower()
    if not code or code in _SPECIAL_CODES:
        return code

    language = _lookup(code)
    if language is None:
        logger.debug("Unknown language code '%s', keeping as-is", code)
        return code

    return getattr(language, "bibliographic", None) or language.alpha_3


def languages_match(code1: str | None, code2: str | None) -> bool:
    """Check if two language codes represent the same language.

    The comparison is standard-agnostic: "ru", "rus" and "RUS" all match.
    An empty code never matches anything, including another empty code.

    Examples:
        >>> languages_match("de", "ger")
        True
        >>> languages_match("", "")
        False
    """
    norm1 = normalize_language(code1)
    norm2 = normalize_language(code2)
    return bool(norm1) and norm1 == norm2


def is_valid_language_code(code: str | None) -> bool:
    """Check if a code is a recognised ISO 639 language code."""
    if not code:
        return False
    code = code.strip().lower()
    return code in _SPECIAL_CODES or _lookup(code) is not None
