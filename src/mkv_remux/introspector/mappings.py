"""Pure mapping functions for ffprobe to MKV Remux type conversions."""

from mkv_remux.domain import StreamType

# ffprobe codec_type -> StreamType
FFPROBE_TO_STREAM_TYPE: dict[str, StreamType] = {
    "video": StreamType.VIDEO,
    "audio": StreamType.AUDIO,
    "subtitle": StreamType.SUBTITLE,
}


def map_stream_type(codec_type: object) -> StreamType:
    """Map ffprobe codec_type to a StreamType.

    Args:
        codec_type: The codec_type from ffprobe.

    Returns:
        Matching StreamType, StreamType.OTHER for anything else
        (attachments, data streams, missing or non-string values).
    """
    if not isinstance(codec_type, str) or not codec_type:
        return StreamType.OTHER
    return FFPROBE_TO_STREAM_TYPE.get(codec_type.lower(), StreamType.OTHER)
