# project_starter/log_manager.py
"""
Centralized logger factory for Project Starter.

:func:`get_logger` returns a configured :class:`logging.Logger` with:
- Colored console logs via `colorlog` when stdout is a TTY
- Plain console logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (no duplicate handlers across calls)

Environment variables
---------------------
PROJECT_STARTER_FORCE_COLOR=true|false
    Force colored logging on or off. Without it, color is enabled only if
    stdout is a TTY.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

__all__ = ["get_logger", "parse_level"]

LOGGER_NAME = "project_starter"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(message)s"
_FILE_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = "%(log_color)s[%(levelname)s]%(reset)s %(log_color)s%(message)s%(reset)s"

_TRUTHY = {"1", "true", "yes", "on"}


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("PROJECT_STARTER_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in _TRUTHY
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        # Closed or replaced stdout (e.g. some test runners).
        return False


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever ``sys.stdout`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stdout)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def _build_stream_handler() -> logging.Handler:
    handler = _StdoutHandler()
    if _should_use_color():
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt=_COLOR_FMT,
                datefmt=_DATEFMT,
                log_colors=_LEVEL_COLORS,
            )
        )
        return handler
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger) -> None:
    """Attach a single stream handler to `logger` if not already attached."""
    if getattr(logger, "_starter_stream_handler_attached", False):
        return
    logger.addHandler(_build_stream_handler())
    logger._starter_stream_handler_attached = True  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path per logger."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_FILE_FMT, datefmt=_DATEFMT))
    logger.addHandler(fhandler)


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant.

    Unknown or empty names fall back to ``default``.
    """
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "project_starter"
        Logger name.
    level : int, default logging.INFO
        Log level for this logger.
    log_to_file : Optional[str], default None
        Optional path for file logging, attached once per unique path.

    Returns
    -------
    logging.Logger
        A configured logger with ``propagate = False``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    _attach_stream_handler(logger)
    if log_to_file:
        _attach_file_handler(logger, log_to_file)

    logger.propagate = False
    return logger
