"""Logging setup shared by the CLI and tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: int | str) -> int:
    """Return a numeric logging level for an int or a level name like "debug".

    Raises:
        RuntimeError: if `level` is not a known level name.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise RuntimeError(f"Unknown log level: {level!r}")
    return value


def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Send pipeline logs to stdout and, optionally, to a file.

    Args:
        log_path: Optional log file; parent directories are created.
        level: Logging level or level name (defaults to INFO).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, handlers=handlers)
