"""Severity-tagged log lines and a crash handler that dumps tracebacks."""

from __future__ import annotations

import faulthandler
import inspect
import logging
from enum import IntEnum
from typing import IO

LOG_FILENAME = "vigilante.log"

_logger = logging.getLogger("vigilui")


class Severity(IntEnum):
    ERROR = 0
    WARNING = 1
    INFO = 2


_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


def format_log(severity: Severity, filename: str, line: int, message: str) -> str:
    """Build a line of the form ``[SEVERITY] [file: line] message``."""
    basename = filename.rpartition("/")[2]
    return f"[{severity.name}] [{basename}: {line}] {message}"


def log(severity: Severity, message: str) -> str:
    """Log ``message`` tagged with the caller's file and line; return the line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is not None:
            filename, line = caller.f_code.co_filename, caller.f_lineno
        else:
            filename, line = "?", 0
    finally:
        del frame, caller
    text = format_log(severity, filename.replace("\\", "/"), line, message)
    _logger.log(_LEVELS[severity], text)
    return text


def install_crash_handler(path: str = LOG_FILENAME) -> IO[str]:
    """Write a traceback to ``path`` when the process crashes.

    The returned file must stay open for as long as the handler is installed.
    """
    crash_file = open(path, "w", encoding="utf-8")
    faulthandler.enable(file=crash_file)
    return crash_file