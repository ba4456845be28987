"""Unit tests for FFprobeIntrospector.

Stream parsing itself is covered in introspector/test_parsers.py. These tests
cover tool resolution, the subprocess call and error reporting.
"""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mkv_remux.introspector import FFprobeIntrospector, ProbeError

FFPROBE = Path("/usr/bin/ffprobe")


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    path = tmp_path / "movie.mkv"
    path.touch()
    return path


def _completed(stdout: str) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    result.returncode = 0
    return result


class TestToolResolution:
    """Tests for locating ffprobe."""

    def test_explicit_path_is_used(self):
        introspector = FFprobeIntrospector(FFPROBE)
        assert introspector.ffprobe_path == FFPROBE

    def test_path_lookup(self):
        with patch(
            "mkv_remux.introspector.ffprobe.shutil.which",
            return_value="/opt/bin/ffprobe",
        ):
            introspector = FFprobeIntrospector()
        assert introspector.ffprobe_path == Path("/opt/bin/ffprobe")

    def test_missing_tool_raises(self):
        with patch("mkv_remux.introspector.ffprobe.shutil.which", return_value=None):
            with pytest.raises(ProbeError, match="ffprobe is not installed"):
                FFprobeIntrospector()


class TestBuildCommand:
    """Tests for the ffprobe argument list."""

    def test_command_layout(self):
        cmd = FFprobeIntrospector(FFPROBE).build_command(Path("/media/a b.mkv"))
        assert cmd == [
            str(FFPROBE),
            "-show_format",
            "-show_streams",
            "-print_format",
            "json",
            "-loglevel",
            "quiet",
            "/media/a b.mkv",
        ]


class TestProbe:
    """Tests for FFprobeIntrospector.probe()."""

    def test_success(self, media_file: Path, russian_movie_fixture: dict):
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            return_value=_completed(json.dumps(russian_movie_fixture)),
        ) as mock_run:
            result = FFprobeIntrospector(FFPROBE).probe(media_file)

        assert len(result.streams) == 4
        assert result.file_path == media_file
        args, kwargs = mock_run.call_args
        assert args[0][-1] == str(media_file)
        assert kwargs["check"] is True
        assert "shell" not in kwargs

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ProbeError, match="File not found"):
            FFprobeIntrospector(FFPROBE).probe(tmp_path / "missing.mkv")

    def test_nonzero_exit(self, media_file: Path):
        error = subprocess.CalledProcessError(1, ["ffprobe"], stderr="")
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run", side_effect=error
        ):
            with pytest.raises(ProbeError, match="exit code 1") as exc_info:
                FFprobeIntrospector(FFPROBE).probe(media_file)
        assert exc_info.value.__cause__ is error

    def test_launch_failure(self, media_file: Path):
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            side_effect=FileNotFoundError("no such file"),
        ):
            with pytest.raises(ProbeError, match="Could not run ffprobe"):
                FFprobeIntrospector(FFPROBE).probe(media_file)

    def test_invalid_json(self, media_file: Path):
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            return_value=_completed("not json"),
        ):
            with pytest.raises(ProbeError, match="Invalid ffprobe output"):
                FFprobeIntrospector(FFPROBE).probe(media_file)

    def test_non_object_json(self, media_file: Path):
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            return_value=_completed("[1, 2]"),
        ):
            with pytest.raises(ProbeError, match="expected a JSON object"):
                FFprobeIntrospector(FFPROBE).probe(media_file)

    def test_missing_streams(self, media_file: Path):
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            return_value=_completed("{}"),
        ):
            with pytest.raises(ProbeError, match="Missing 'streams'"):
                FFprobeIntrospector(FFPROBE).probe(media_file)

    @pytest.mark.parametrize(
        "stream",
        [
            {"index": 0, "codec_type": "video", "tags": "rus"},
            {"index": 0, "codec_type": 1},
            {"index": 0, "codec_type": "audio", "codec_name": 5, "channels": 2},
        ],
    )
    def test_mistyped_stream_fields(self, media_file: Path, stream: dict):
        output = json.dumps({"format": [], "streams": [stream]})
        with patch(
            "mkv_remux.introspector.ffprobe.subprocess.run",
            return_value=_completed(output),
        ):
            result = FFprobeIntrospector(FFPROBE).probe(media_file)

        assert len(result.streams) == 1
        assert result.container_format is None
