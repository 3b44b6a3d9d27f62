"""
Logging configuration for the mcdev-copado CLI.

Copado shows whatever the function writes to its job log, so the
console format depends on how much the user asked to see:

    PROGRESS and above   bare messages ("Initializing npm")
    INFO                 time + logger name
    DEBUG                time, level and file:line

Levels come from the CLI flags, then MCDEV_LOG_LEVEL, then PROGRESS.
MCDEV_LOG_FILE / MCDEV_LOG_FILE_LEVEL add a detailed file log.
"""

from __future__ import annotations

import logging
import sys

# Between INFO and WARNING: the user-facing steps of a function run
PROGRESS = 25
logging.addLevelName(PROGRESS, "PROGRESS")

_DETAILED = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d — %(message)s"

# (highest level the format applies to, format, datefmt), checked in order
_CONSOLE_FORMATS = (
    (logging.DEBUG, _DETAILED, "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_PLAIN = "%(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "PROGRESS",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for a CLI run.

    Args:
        level: Console level name; PROGRESS is accepted alongside the
            standard names.
        log_file: Optional path of a detailed log file.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_DETAILED, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)
    logging.raiseExceptions = False


def _console_formatter(level: int) -> logging.Formatter:
    for ceiling, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= ceiling:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_PLAIN)


def _parse_level(level: str | None) -> int:
    """Convert a level name to its number; unknown names mean PROGRESS."""
    if not level:
        return PROGRESS
    numeric = logging.getLevelNamesMapping().get(level.upper())
    return numeric if isinstance(numeric, int) else PROGRESS
