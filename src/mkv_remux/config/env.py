"""Environment variable reader with dependency injection support.

Reads ``MKV_REMUX_*`` variables with type conversion. Accepts an optional
env mapping so tests never have to touch os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "MKV_REMUX_"


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Example:
        reader = EnvReader(env={"MKV_REMUX_MAX_AUDIO_CHANNELS": "8"})
        reader.get_int("MKV_REMUX_MAX_AUDIO_CHANNELS")  # Returns 8
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string, treating empty values as unset."""
        value = self._env.get(var)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer.

        Logs a warning and returns default if the value cannot be parsed.
        """
        value = self.get_str(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Get a path with tilde expansion."""
        value = self.get_str(var)
        if value is None:
            return default
        return Path(value).expanduser()

    def get_list(self, var: str, separator: str = ",") -> list[str] | None:
        """Get a separator-delimited list, dropping empty items."""
        value = self.get_str(var)
        if value is None:
            return None
        return [item.strip() for item in value.split(separator) if item.strip()]
