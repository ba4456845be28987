"""Tests for EnvReader."""

from pathlib import Path

from mkv_remux.config import EnvReader


class TestEnvReader:
    def test_get_str(self):
        reader = EnvReader(env={"MKV_REMUX_TARGET_LANGUAGE": " jpn "})
        assert reader.get_str("MKV_REMUX_TARGET_LANGUAGE") == "jpn"

    def test_unset_and_empty_use_default(self):
        reader = EnvReader(env={"EMPTY": "  "})
        assert reader.get_str("MISSING", "x") == "x"
        assert reader.get_str("EMPTY", "y") == "y"

    def test_get_int(self):
        reader = EnvReader(env={"N": "8"})
        assert reader.get_int("N") == 8

    def test_get_int_invalid(self, caplog):
        reader = EnvReader(env={"N": "eight"})
        assert reader.get_int("N", 6) == 6
        assert "Invalid integer value for N" in caplog.text

    def test_get_path_expands_user(self):
        reader = EnvReader(env={"P": "~/bin/ffprobe"})
        assert reader.get_path("P") == Path("~/bin/ffprobe").expanduser()

    def test_get_list(self):
        reader = EnvReader(env={"L": "ac3, eac3,,aac "})
        assert reader.get_list("L") == ["ac3", "eac3", "aac"]
        assert reader.get_list("MISSING") is None
