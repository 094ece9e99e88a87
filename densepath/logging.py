"""Logging utilities for densepath.

Loggers live under the ``densepath`` namespace, write to stderr and default
to WARNING so that library use stays quiet unless a caller opts in.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_default_stream: Optional[object] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack duplicate handlers.

    Args:
        name: Logger name, typically ``__name__``. If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from densepath.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("labeling 12 vertices")
    """
    if name is None:
        name = "densepath"

    if name == "densepath" or name.startswith("densepath."):
        logger_name = name
    else:
        logger_name = f"densepath.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(_default_stream or sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all densepath loggers.

    Args:
        level: ``logging.DEBUG``, ``logging.INFO``, ... or the level name
            as a string ('DEBUG', 'INFO', ...).
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for densepath.

    Replaces the handlers of every logger created so far and sets the
    defaults used for loggers created later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _default_stream

    level = _coerce_level(level)
    if stream is None:
        stream = sys.stderr
    if format_string is not None:
        _DEFAULT_FORMAT = format_string

    formatter = logging.Formatter(_DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _default_stream = stream
    _DEFAULT_LEVEL = level
