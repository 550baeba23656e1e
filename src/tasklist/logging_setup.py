# src/tasklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER_PREFIX = "tasklist."
STORE_LOGGER_PREFIX = "tasklist.tasks."
CONTROLLER_LOGGER = "tasklist.core.controller"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the REPL readable; the log file still gets everything.

    - store logs (one per write) reach the console only at WARNING+
    - controller failures already reach the user through notify(), so their
      tracebacks stay in the file unless CRITICAL
    - Python warnings and third-party loggers only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == CONTROLLER_LOGGER and record.exc_info:
            return record.levelno >= logging.CRITICAL

        if name.startswith(STORE_LOGGER_PREFIX):
            return record.levelno >= logging.WARNING

        if name.startswith(APP_LOGGER_PREFIX):
            return True

        return record.levelno >= logging.ERROR


def _file_handler(log_dir: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(str(log_dir / "tasklist.log"), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    return fh


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasklist",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Install a filtered stderr handler and a full file handler on the root logger.

    Call once at startup, before the first log line. Calling it again replaces
    the handlers instead of stacking duplicates.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    root.addHandler(_file_handler(Path(log_dir), file_level, fmt))

    # warnings.warn(...) -> 'py.warnings' logger (ERROR+ on console via the filter)
    logging.captureWarnings(True)
