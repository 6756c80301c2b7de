"""
Logging configuration — set up once by the CLI entrypoint.

Prompts, warnings and the JSON list own stdout, so diagnostics only
ever go to stderr and, when MODLIST_LOG_FILE is set, to a log file.

Level precedence:
    CLI flag  >  MODLIST_LOG_LEVEL env var  >  WARNING (default)
"""

from __future__ import annotations

import logging
import sys

# Used for DEBUG on the console and always for the log file.
_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

# (format, datefmt) per console level, most verbose first.
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, _DETAILED, "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the session's log handlers on the root logger.

    Args:
        level: Console level name; unknown names mean WARNING.
        log_file: Optional path of a UTF-8 log file.
        log_file_level: Level for the log file, ``level`` when unset.
    """
    console_level = _level_number(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_console_handler(console_level))
    root.setLevel(console_level)

    if log_file:
        file_level = _level_number(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_DETAILED, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)
        root.setLevel(min(console_level, file_level))

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = "%(message)s", None
    for threshold, candidate, candidate_datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            fmt, datefmt = candidate, candidate_datefmt
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _level_number(name: str | None) -> int:
    numeric = logging.getLevelName(name.upper()) if name else None
    return numeric if isinstance(numeric, int) else logging.WARNING
