"""Logging setup for the mkv-remux CLI.

Everything is written to stderr (and optionally a rotating file); stdout is
left to the generated command.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from mkv_remux.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from mkv_remux.config.models import LoggingConfig

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(source_tag)s%(message)s"


class SourceTagFilter(logging.Filter):
    """Prefix text records with the media file they concern.

    Sets ``source_tag`` to ``"[movie.mkv] "`` when the record was logged with
    ``extra={"source": path}``, and to an empty string otherwise.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        source = getattr(record, "source", None)
        record.source_tag = f"[{Path(source).name}] " if source else ""
        return True


def _attach(
    root: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
    json_output: bool,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    if not json_output:
        handler.addFilter(SourceTagFilter())
    root.addHandler(handler)


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to ``config``.

    Args:
        config: Logging configuration.
    """
    level = _LEVEL_MAP.get(config.level.casefold(), logging.WARNING)
    json_output = config.format.casefold() == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if json_output:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    _attach(
        root_logger, logging.StreamHandler(sys.stderr), level, formatter, json_output
    )

    if not config.file:
        return

    file_path = Path(config.file).expanduser()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        # reported through the stderr handler
        root_logger.warning("Could not open log file %s: %s", file_path, e)
        return
    _attach(root_logger, file_handler, level, formatter, json_output)
