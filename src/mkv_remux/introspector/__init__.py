"""Introspector module for MKV Remux.

This module provides stream probing capabilities:

- StreamProber: Protocol defining the probing interface
- FFprobeIntrospector: Production implementation using ffprobe
- ProbeError: Exception for probing failures
- parse_ffprobe_output / parse_streams: Pure ffprobe JSON parsers
"""

from mkv_remux.introspector.ffprobe import FFprobeIntrospector
from mkv_remux.introspector.interface import ProbeError, StreamProber
from mkv_remux.introspector.parsers import (
    parse_ffprobe_output,
    parse_stream,
    parse_streams,
)

__all__ = [
    "FFprobeIntrospector",
    "ProbeError",
    "StreamProber",
    "parse_ffprobe_output",
    "parse_stream",
    "parse_streams",
]
