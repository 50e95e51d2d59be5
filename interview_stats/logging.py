from __future__ import annotations

import logging
import os
import sys


# THINKING sits between DEBUG and INFO; used for computed intermediate values
THINKING_LEVEL = logging.DEBUG + 5
logging.addLevelName(THINKING_LEVEL, "THINKING")
setattr(logging, "THINKING", THINKING_LEVEL)


def _thinking(self, msg, *args, **kwargs):
    if self.isEnabledFor(THINKING_LEVEL):
        self._log(THINKING_LEVEL, msg, args, **kwargs)


setattr(logging.Logger, "thinking", _thinking)

BASE_LOGGER = "interview_stats"


class _ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\x1b[36m",
        "THINKING": "\x1b[38;5;208m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, fmt: str, datefmt=None, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color or record.levelname not in self.COLORS:
            return super().format(record)
        # colour a copy; other handlers must still see the plain level name
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(tinted)


_configured = False


def _configure_base(level_name: str | None = None) -> logging.Logger:
    global _configured
    level_env = (level_name or os.getenv("LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(level_env)
    if not isinstance(level, int):
        level = logging.INFO
    try:
        is_tty = sys.stdout.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    use_color = is_tty and os.getenv("LOG_NO_COLOR") != "1"

    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    base.propagate = False
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_ColorFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            use_color=use_color,
        ))
        base.addHandler(handler)
    _configured = True
    return base


def get_logger(name: str | None = None, *, level_name: str | None = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    if not _configured or not base.handlers or level_name:
        base = _configure_base(level_name)
    return base.getChild(name) if name else base
