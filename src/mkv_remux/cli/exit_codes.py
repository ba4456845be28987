"""Centralized exit codes for the mkv-remux CLI.

Exit codes:
    0: Success, the command was printed
    1: Usage error (wrong argument count, unknown option)
    2: Probe error (ffprobe missing or failed, unreadable output)
    3: Configuration error (invalid config file or value)
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the mkv-remux CLI."""

    SUCCESS = 0
    USAGE_ERROR = 1
    PROBE_ERROR = 2
    CONFIG_ERROR = 3
