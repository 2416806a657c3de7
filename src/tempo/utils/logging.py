"""Debug logging for the tempo command-line tools."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TextIO

__all__ = ["configure_logging", "LOG_FILE_NAME"]

LOG_FILE_NAME = "tempo.log"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    debug: bool = False,
    *,
    log_dir: Path | str | None = None,
    stream: TextIO | None = None,
) -> Path | None:
    """Route DEBUG records to stderr, and to a rotating file when ``log_dir`` is set.

    Does nothing unless ``debug`` is true. Returns the log file path, if any.
    """

    if not debug:
        return None

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    log_path: Path | None = None
    if log_dir:
        target_dir = Path(log_dir).expanduser()
        target_dir.mkdir(parents=True, exist_ok=True)
        log_path = target_dir / LOG_FILE_NAME
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    logging.captureWarnings(True)
    logging.getLogger(__name__).debug("Debug logging enabled (file=%s)", log_path)
    return log_path
