"""Domain models for MKV Remux.

This package contains the core types shared by the introspector, the
selection policy and the command formatter:

- StreamType: Kind of a container stream
- StreamDescriptor: Read-only view over one ffprobe stream entry
- ProbeResult: All streams of one probed file
- StreamSelection: Streams chosen for the remuxed output

Usage:
    from mkv_remux.domain import StreamDescriptor, StreamType
"""

from .models import (
    ProbeResult,
    StreamDescriptor,
    StreamSelection,
    StreamType,
)

__all__ = [
    "ProbeResult",
    "StreamDescriptor",
    "StreamSelection",
    "StreamType",
]
