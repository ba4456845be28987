"""StreamProber interface for stream metadata extraction."""

from pathlib import Path
from typing import Protocol

from mkv_remux.domain import ProbeResult


class ProbeError(Exception):
    """Raised when probing a media file fails."""

    pass


class StreamProber(Protocol):
    """Protocol for stream probing implementations.

    Implementations run an external tool over a media file and return the
    flat list of streams it contains.
    """

    def probe(self, path: Path) -> ProbeResult:
        """Extract stream metadata from a media file.

        Args:
            path: Path to the media file.

        Returns:
            ProbeResult containing the parsed streams.

        Raises:
            ProbeError: If the file cannot be probed.
        """
        ...
