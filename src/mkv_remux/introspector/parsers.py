"""Pure parsing functions for ffprobe JSON output.

These functions transform ffprobe JSON data into MKV Remux domain objects.
All functions are pure (no I/O, no side effects besides logging).
"""

import logging
from pathlib import Path

from mkv_remux.domain import ProbeResult, StreamDescriptor, StreamType
from mkv_remux.introspector.mappings import map_stream_type

logger = logging.getLogger(__name__)


def validate_channels(value: object, file_path: str | None = None) -> int:
    """Validate an ffprobe channel count.

    Args:
        value: Raw ``channels`` value from ffprobe.
        file_path: File path context for warnings.

    Returns:
        The channel count, or 0 if it is missing or invalid.
    """
    context = f" in {file_path}" if file_path else ""
    if value is None:
        return 0
    if not isinstance(value, int) or isinstance(value, bool):
        logger.warning(
            "Expected int for channels, got %s%s", type(value).__name__, context
        )
        return 0
    if value < 0:
        logger.warning("Invalid negative channels: %d%s", value, context)
        return 0
    return value


def _string_field(stream: dict, key: str, index: int, context: str) -> str:
    """Return a string field of a stream entry, or "" if missing or mistyped."""
    value = stream.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        logger.warning(
            "Expected str for %s on stream %d, got %s%s",
            key,
            index,
            type(value).__name__,
            context,
        )
        return ""
    return value


def parse_stream(stream: dict, file_path: str | None = None) -> StreamDescriptor:
    """Parse a single ffprobe stream dict into a StreamDescriptor.

    Args:
        stream: Stream dictionary from ffprobe JSON.
        file_path: Optional file path for context in warning messages.

    Returns:
        StreamDescriptor domain object.
    """
    context = f" in {file_path}" if file_path else ""
    index = stream["index"]

    codec_type = map_stream_type(_string_field(stream, "codec_type", index, context))

    tags = stream.get("tags") or {}
    if not isinstance(tags, dict):
        logger.warning(
            "Ignoring non-object tags on stream %d: %r%s", index, tags, context
        )
        tags = {}
    language = tags.get("language") or ""

    channels = 0
    if codec_type is StreamType.AUDIO:
        channels = validate_channels(stream.get("channels"), file_path)

    return StreamDescriptor(
        index=index,
        codec_name=_string_field(stream, "codec_name", index, context),
        codec_type=codec_type,
        channels=channels,
        language=str(language).strip(),
    )


def parse_streams(
    streams: list[dict],
    file_path: str | None = None,
) -> tuple[list[StreamDescriptor], list[str]]:
    """Parse stream data into StreamDescriptor objects.

    Args:
        streams: List of stream dictionaries from ffprobe.
        file_path: Optional file path for context in warning messages.

    Returns:
        Tuple of (streams list, warnings list).
    """
    parsed: list[StreamDescriptor] = []
    warnings: list[str] = []
    seen_indices: set[int] = set()

    for stream in streams:
        if not isinstance(stream, dict):
            warnings.append(f"Ignoring malformed stream entry: {stream!r}")
            continue

        index = stream.get("index")
        if index is None:
            warnings.append("Stream entry without index, skipping")
            continue
        if not isinstance(index, int) or isinstance(index, bool):
            warnings.append(f"Invalid stream index {index!r}, skipping")
            continue

        if index in seen_indices:
            warnings.append(f"Duplicate stream index {index}, skipping")
            continue
        seen_indices.add(index)

        parsed.append(parse_stream(stream, file_path))

    return parsed, warnings


def parse_ffprobe_output(path: Path, data: dict) -> ProbeResult:
    """Parse ffprobe JSON output into a ProbeResult.

    Args:
        path: Path to the probed file.
        data: Parsed ffprobe JSON output.

    Returns:
        ProbeResult with streams and warnings.
    """
    streams, warnings = parse_streams(data.get("streams") or [], str(path))

    format_info = data.get("format") or {}
    if not isinstance(format_info, dict):
        warnings.append(f"Ignoring malformed format section: {format_info!r}")
        format_info = {}
    container_format = format_info.get("format_name")
    if not isinstance(container_format, str):
        container_format = None

    if not streams:
        warnings.append("No streams found in file")

    for warning in warnings:
        logger.debug("%s: %s", path, warning)

    return ProbeResult(
        file_path=path,
        container_format=container_format,
        streams=streams,
        warnings=warnings,
    )
