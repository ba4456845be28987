"""Unit tests for language code normalization."""

import pytest

from mkv_remux.language import (
    is_valid_language_code,
    languages_match,
    normalize_language,
)


class TestNormalizeLanguage:
    """Tests for normalize_language()."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("ru", "rus"),
            ("en", "eng"),
            ("de", "ger"),
            ("fr", "fre"),
            ("ja", "jpn"),
        ],
    )
    def test_two_letter_codes(self, code: str, expected: str) -> None:
        """ISO 639-1 codes convert to ISO 639-2/B."""
        assert normalize_language(code) == expected

    def test_terminological_code_converts_to_bibliographic(self) -> None:
        assert normalize_language("deu") == "ger"
        assert normalize_language("fra") == "fre"

    def test_bibliographic_code_is_unchanged(self) -> None:
        assert normalize_language("ger") == "ger"
        assert normalize_language("rus") == "rus"

    def test_case_and_whitespace_are_ignored(self) -> None:
        assert normalize_language("  RUS ") == "rus"

    def test_empty_and_none(self) -> None:
        assert normalize_language(None) == ""
        assert normalize_language("") == ""
        assert normalize_language("   ") == ""

    def test_special_codes_pass_through(self) -> None:
        assert normalize_language("und") == "und"
        assert normalize_language("mul") == "mul"

    def test_unknown_code_is_kept(self) -> None:
        assert normalize_language("xyzzy") == "xyzzy"


class TestLanguagesMatch:
    """Tests for languages_match()."""

    def test_same_code(self) -> None:
        assert languages_match("rus", "rus")

    def test_across_standards(self) -> None:
        assert languages_match("ru", "rus")
        assert languages_match("deu", "ger")
        assert languages_match("EN", "eng")

    def test_different_languages(self) -> None:
        assert not languages_match("rus", "eng")

    def test_empty_never_matches(self) -> None:
        assert not languages_match("", "")
        assert not languages_match(None, "eng")
        assert not languages_match("eng", "")


class TestIsValidLanguageCode:
    """Tests for is_valid_language_code()."""

    def test_valid_codes(self) -> None:
        assert is_valid_language_code("ru")
        assert is_valid_language_code("rus")
        assert is_valid_language_code("ger")
        assert is_valid_language_code("deu")
        assert is_valid_language_code("und")

    def test_invalid_codes(self) -> None:
        assert not is_valid_language_code("")
        assert not is_valid_language_code(None)
        assert not is_valid_language_code("english-ish")
