"""Application logging: console-style records to stderr and a rotating file."""

from __future__ import annotations

import contextlib
import contextvars
import logging
import logging.handlers
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from wfmon.mode import Mode

LOGGER_NAME = "wfmon"
LOG_FILENAME = "/usr/local/var/log/wfmon.log"
LOG_MAX_SIZE = 500 * 1024 * 1024  # bytes
LOG_MAX_BACKUPS = 3
LOG_MAX_AGE_DAYS = 28

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_LEVEL_NAMES = {
    logging.DEBUG: ("DEBUG", 35),
    logging.INFO: ("INFO", 34),
    logging.WARNING: ("WARN", 33),
    logging.ERROR: ("ERROR", 31),
    logging.CRITICAL: ("FATAL", 31),
}

_current: contextvars.ContextVar[Optional[logging.Logger]] = contextvars.ContextVar(
    "wfmon_logger", default=None
)


def syslog_time(moment: datetime) -> str:
    """Format a moment as a syslog stamp, e.g. ``Jan  2 15:04:05``."""
    return f"{_MONTHS[moment.month - 1]} {moment.day:>2} {moment:%H:%M:%S}"


def _colored_level(levelno: int, levelname: str) -> str:
    name, color = _LEVEL_NAMES.get(levelno, (levelname.upper(), 31))
    return f"\x1b[{color}m{name}\x1b[0m"


class _ConsoleFormatter(logging.Formatter):
    """Space separated: time, coloured level, optional caller, message."""

    def __init__(self, with_caller: bool) -> None:
        super().__init__()
        self._with_caller = with_caller

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            syslog_time(datetime.fromtimestamp(record.created)),
            _colored_level(record.levelno, record.levelname),
        ]
        if self._with_caller:
            caller = "/".join(Path(record.pathname).parts[-2:])
            parts.append(f"{caller}:{record.lineno}")
        parts.append(record.getMessage())
        text = " ".join(parts)
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


class _RotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file that creates its directory and drops backups past their age."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            filename,
            maxBytes=LOG_MAX_SIZE,
            backupCount=LOG_MAX_BACKUPS,
            encoding="utf-8",
            delay=True,
        )

    def _open(self):  # type: ignore[no-untyped-def]
        os.makedirs(os.path.dirname(self.baseFilename) or ".", exist_ok=True)
        return super()._open()

    def doRollover(self) -> None:
        super().doRollover()
        oldest = time.time() - LOG_MAX_AGE_DAYS * 24 * 60 * 60
        for index in range(1, self.backupCount + 1):
            backup = f"{self.baseFilename}.{index}"
            if os.path.exists(backup) and os.path.getmtime(backup) < oldest:
                os.remove(backup)


def new_logger(mode: Mode) -> logging.Logger:
    """Configure and return the application logger for ``mode``.

    Errors and worse go to stderr; everything from debug up goes to the log
    file. In DEV mode records also carry their caller.
    """
    if mode == Mode.DEV:
        with_caller = True
    elif mode == Mode.PROD:
        with_caller = False
    else:
        raise ValueError(f"got unsupported application mode {mode}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = _ConsoleFormatter(with_caller)

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(logging.ERROR)
    stderr.setFormatter(formatter)

    file_handler = _RotatingFileHandler(LOG_FILENAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    logger.addHandler(stderr)
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def ctx_logger() -> logging.Logger:
    """Return the logger bound to the current context, else the global one."""
    bound = _current.get()
    return bound if bound is not None else logging.getLogger(LOGGER_NAME)


@contextlib.contextmanager
def with_logger(logger: logging.Logger) -> Iterator[logging.Logger]:
    """Bind ``logger`` to the current context for the duration of the block."""
    token = _current.set(logger)
    try:
        yield logger
    finally:
        _current.reset(token)