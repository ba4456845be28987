"""FFprobe-based implementation of the StreamProber protocol."""

import json
import logging
import shutil
import subprocess  # nosec B404 - subprocess is required for ffprobe invocation
from pathlib import Path

from mkv_remux.domain import ProbeResult
from mkv_remux.introspector.interface import ProbeError
from mkv_remux.introspector.parsers import parse_ffprobe_output

logger = logging.getLogger(__name__)


class FFprobeIntrospector:
    """ffprobe-based implementation of the StreamProber protocol.

    Extracts stream-level metadata from media files using ffprobe.
    """

    def __init__(self, ffprobe_path: Path | None = None) -> None:
        """Initialize the introspector.

        Args:
            ffprobe_path: Optional explicit path to ffprobe. If not provided,
                ffprobe is looked up in PATH.

        Raises:
            ProbeError: If ffprobe is not available.
        """
        self._ffprobe_path = ffprobe_path or self._find_on_path()

        if self._ffprobe_path is None:
            raise ProbeError(
                "ffprobe is not installed or not in PATH. "
                "Install ffmpeg or set MKV_REMUX_FFPROBE_PATH."
            )

    @staticmethod
    def _find_on_path() -> Path | None:
        found = shutil.which("ffprobe")
        return Path(found) if found else None

    @property
    def ffprobe_path(self) -> Path:
        return self._ffprobe_path

    def build_command(self, path: Path) -> list[str]:
        """Build the ffprobe argument list for a file."""
        return [
            str(self._ffprobe_path),
            "-show_format",
            "-show_streams",
            "-print_format",
            "json",
            "-loglevel",
            "quiet",
            str(path),
        ]

    def probe(self, path: Path) -> ProbeResult:
        """Extract stream metadata from a media file.

        Args:
            path: Path to the media file.

        Returns:
            ProbeResult containing the parsed streams.

        Raises:
            ProbeError: If the file cannot be probed.
        """
        if not path.exists():
            raise ProbeError(f"File not found: {path}")

        try:
            ffprobe_output = self._run_ffprobe(path)
        except subprocess.CalledProcessError as e:
            raise ProbeError(
                f"ffprobe failed for {path} (exit code {e.returncode})"
            ) from e
        except OSError as e:
            raise ProbeError(f"Could not run ffprobe for {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProbeError(f"Invalid ffprobe output for {path}: {e}") from e

        return parse_ffprobe_output(path, ffprobe_output)

    def _run_ffprobe(self, path: Path) -> dict:
        """Run ffprobe and return parsed JSON output.

        Raises:
            subprocess.CalledProcessError: If ffprobe returns non-zero.
            json.JSONDecodeError: If output is not valid JSON.
            ProbeError: If output is missing required keys.
        """
        cmd = self.build_command(path)
        logger.debug("Running: %s", " ".join(cmd))

        result = subprocess.run(  # nosec B603 - argument list, no shell
            cmd,
            capture_output=True,
            text=True,
            errors="replace",  # Handle non-UTF8 tag values
            check=True,
        )
        data = json.loads(result.stdout)

        if not isinstance(data, dict):
            raise ProbeError(
                f"Unexpected ffprobe output for {path}: "
                f"expected a JSON object, got {type(data).__name__}"
            )
        if not isinstance(data.get("streams"), list):
            raise ProbeError(
                f"Missing 'streams' in ffprobe output for {path}. "
                "File may be corrupted or not a valid media file."
            )

        return data
