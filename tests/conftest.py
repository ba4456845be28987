"""Shared test fixtures for MKV Remux."""

import json
import logging
import os
from pathlib import Path

import pytest

from mkv_remux.domain import StreamDescriptor, StreamType


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path) -> Path:
    """Point the config file at an empty temp location and clear MKV_REMUX_* vars."""
    for var in list(os.environ):
        if var.startswith("MKV_REMUX_"):
            monkeypatch.delenv(var)
    config_path = tmp_path / "config.toml"
    monkeypatch.setenv("MKV_REMUX_CONFIG_PATH", str(config_path))
    return config_path


def load_ffprobe_fixture(name: str) -> dict:
    """Load an ffprobe JSON fixture by name.

    Args:
        name: Name of the fixture file (without .json extension).

    Returns:
        Parsed JSON data from the fixture.
    """
    fixture_path = Path(__file__).parent / "fixtures" / "ffprobe" / f"{name}.json"
    return json.loads(fixture_path.read_text())


@pytest.fixture
def russian_movie_fixture() -> dict:
    """Russian video, English stereo AAC, Russian 5.1 AC3, Russian subtitles."""
    return load_ffprobe_fixture("russian_movie")


@pytest.fixture
def untagged_video_fixture() -> dict:
    """Video without a language tag, DTS/EAC3 audio, PGS subtitles, a font."""
    return load_ffprobe_fixture("untagged_video")


@pytest.fixture
def multichannel_audio_fixture() -> dict:
    """Japanese video with a 7.1 Russian TrueHD track and several subtitles."""
    return load_ffprobe_fixture("multichannel_audio")


def make_stream(
    index: int,
    codec_type: str,
    language: str = "",
    codec_name: str = "",
    channels: int = 0,
) -> StreamDescriptor:
    """Build a StreamDescriptor with sensible codec defaults."""
    stream_type = StreamType(codec_type)
    if not codec_name:
        codec_name = {
            StreamType.VIDEO: "h264",
            StreamType.AUDIO: "aac",
            StreamType.SUBTITLE: "subrip",
        }.get(stream_type, "bin_data")
    return StreamDescriptor(
        index=index,
        codec_name=codec_name,
        codec_type=stream_type,
        channels=channels,
        language=language,
    )


@pytest.fixture
def scenario_streams() -> list[StreamDescriptor]:
    """video(rus), audio(aac 2ch eng), audio(ac3 6ch rus), subtitle(rus)."""
    return [
        make_stream(0, "video", "rus"),
        make_stream(1, "audio", "eng", "aac", 2),
        make_stream(2, "audio", "rus", "ac3", 6),
        make_stream(3, "subtitle", "rus"),
    ]


@pytest.fixture
def stream_factory():
    """Return the make_stream helper."""
    return make_stream
