"""
Logging Configuration.

This module provides the logger factory shared by every package of the
conversion engine and its command line front end. Loggers handed out here
write to stdout in a single pipe-separated format. Their level and their
output stream can be changed in one place, so a command line front end can
keep stdout for its results.
"""

import logging
import sys
import threading
from typing import Dict, Optional, TextIO, Union

_DEFAULT_LEVEL = logging.INFO
_loggers: Dict[str, logging.Logger] = {}
_handlers: Dict[str, logging.StreamHandler] = {}
_stream: TextIO = sys.stdout
_lock = threading.Lock()


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger configured for the BMN conversion system.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Logging level. Defaults to the level last set with `set_level`.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    with _lock:
        if not logger.handlers:
            handler = logging.StreamHandler(_stream)
            formatter = logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            _handlers[name] = handler
        _loggers[name] = logger

    logger.setLevel(_DEFAULT_LEVEL if level is None else level)
    return logger


def set_level(level: Union[int, str]) -> int:
    """Set the level of every logger created through `get_logger`.

    Parameters
    ----------
    level : int or str
        A numeric level or a level name such as ``"DEBUG"``.

    Returns
    -------
    int
        The numeric level applied.

    Raises
    ------
    ValueError
        If `level` is not a known level name.
    """
    global _DEFAULT_LEVEL

    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level {level!r}")
        level = numeric

    with _lock:
        _DEFAULT_LEVEL = level
        for logger in _loggers.values():
            logger.setLevel(level)
    return level


def set_stream(stream: TextIO) -> None:
    """Redirect every handler created through `get_logger` to `stream`.

    Loggers created afterwards write to `stream` as well.
    """
    global _stream

    with _lock:
        _stream = stream
        for handler in _handlers.values():
            handler.setStream(stream)
