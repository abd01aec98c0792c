# lettercli/log_manager.py
"""
Centralized logger factory for lettercli.

This module provides a single entry point, :func:`get_logger`, that returns a
configured :class:`logging.Logger`. It supports:
- Colored logs via `colorlog` when stderr is a TTY
- Plain logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (prevents duplicate handlers)

Logs go to **stderr**: stdout carries the rendered banner and may be piped.

Environment variables
---------------------
LETTERCLI_FORCE_COLOR=true|false
    Force colored logging on or off regardless of whether stderr is a TTY.
LETTERCLI_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    Level used by :func:`level_from_env`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

from .state import to_bool

__all__ = ["get_logger", "level_from_env"]

# Colors for log levels (colorlog)
_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - [%(name)s] %(message)s"

_STREAM_MARK = "_lettercli_stream_handler_attached"


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("LETTERCLI_FORCE_COLOR")
    if env is not None:
        return to_bool(env, False)
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _build_colored_stream_handler() -> logging.Handler:
    handler = colorlog.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        colorlog.ColoredFormatter(fmt=_COLOR_FMT, datefmt=_PLAIN_DATEFMT, log_colors=_LEVEL_COLORS)
    )
    return handler


def _build_plain_stream_handler() -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger) -> None:
    """Attach one stream handler to ``logger``; later calls are no-ops."""
    if getattr(logger, _STREAM_MARK, False):
        return
    handler = _build_colored_stream_handler() if _should_use_color() else _build_plain_stream_handler()
    logger.addHandler(handler)
    setattr(logger, _STREAM_MARK, True)


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach a file handler for ``log_to_file`` unless one already exists."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


def level_from_env(default: int = logging.WARNING) -> int:
    """Read ``LETTERCLI_LOG_LEVEL``; unknown names give ``default``."""
    raw = os.getenv("LETTERCLI_LOG_LEVEL", "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def get_logger(
    name: str = "lettercli",
    level: int = logging.WARNING,
    log_to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "lettercli"
        Logger name. Library modules log to ``"lettercli"``.
    level : int, default logging.WARNING
        Log level for this logger.
    log_to_file : Optional[str], default None
        Optional filesystem path for file logging.

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
