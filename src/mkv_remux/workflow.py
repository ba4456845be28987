"""End-to-end remux planning: probe, resolve languages, select, format."""

import logging
from dataclasses import dataclass
from pathlib import Path

from mkv_remux.config import RemuxConfig
from mkv_remux.domain import ProbeResult, StreamSelection
from mkv_remux.executor import AudioCodecPolicy, RemuxCommand, build_remux_command
from mkv_remux.introspector import FFprobeIntrospector, StreamProber
from mkv_remux.policy import (
    build_language_priority,
    resolve_original_language,
    select_streams,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemuxPlan:
    """Everything decided for one source file."""

    probe: ProbeResult
    selection: StreamSelection
    command: RemuxCommand


def audio_policy_from_config(config: RemuxConfig) -> AudioCodecPolicy:
    return AudioCodecPolicy(
        copy_codecs=frozenset(config.audio.copy_codecs),
        fallback_codec=config.audio.fallback_codec,
        fallback_bitrate=config.audio.fallback_bitrate,
    )


def plan_remux(
    source: str | Path,
    target: str | Path,
    config: RemuxConfig | None = None,
    lang_override: str | None = None,
    introspector: StreamProber | None = None,
) -> RemuxPlan:
    """Probe a file and build the ffmpeg command that remuxes it.

    Args:
        source: Media file to inspect, placed in the command exactly as given.
        target: Output file for the generated command, also kept as given.
        config: Effective configuration. Defaults apply if None.
        lang_override: Original language given by the user, if any.
        introspector: Stream prober. An FFprobeIntrospector using the
            configured ffprobe path is created if None.

    Returns:
        RemuxPlan with the probe result, stream selection and command.

    Raises:
        ProbeError: If the source cannot be probed.
    """
    config = config or RemuxConfig()
    if introspector is None:
        introspector = FFprobeIntrospector(config.tools.ffprobe)

    probe = introspector.probe(Path(source))
    log_extra = {"source": source}
    logger.info("Probed %d streams", len(probe.streams), extra=log_extra)

    original_language = resolve_original_language(
        lang_override, probe.streams, config.languages.default
    )
    languages = build_language_priority(
        config.languages.target, original_language, config.languages.default
    )
    logger.info(
        "Original language: %s, priority: %s",
        original_language,
        ", ".join(languages),
        extra=log_extra,
    )

    selection = select_streams(
        probe.streams,
        languages,
        original_language,
        max_audio_channels=config.audio.max_channels,
    )
    if selection.is_empty:
        logger.warning("No streams selected for %s", source, extra=log_extra)

    command = build_remux_command(
        selection,
        source,
        target,
        ffmpeg_path=config.tools.ffmpeg or "ffmpeg",
        audio_policy=audio_policy_from_config(config),
    )
    return RemuxPlan(probe=probe, selection=selection, command=command)
