"""Logging setup for sfnav.

The terminal belongs to the UI, so log records only ever go to a file.
``SFNAV_DEBUG`` turns on DEBUG level (and a default ``sfnav_debug.log`` in
the working directory); ``SFNAV_LOG`` names the log file explicitly.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOGGER_NAME = "sfnav"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOGGER: Optional[logging.Logger] = None


def _debug_enabled() -> bool:
    level_env = os.environ.get("SFNAV_DEBUG", "0").lower()
    return level_env in {"1", "true", "yes", "on", "debug"}


def _configure() -> logging.Logger:
    debug_enabled = _debug_enabled()
    level = logging.DEBUG if debug_enabled else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_path = os.environ.get("SFNAV_LOG")
    if log_path:
        log_path = os.path.expanduser(log_path)
    elif debug_enabled:
        log_path = os.path.join(os.getcwd(), "sfnav_debug.log")

    if log_path:
        try:
            handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
        else:
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    # Records must not reach a root handler that would print over the UI.
    logger.propagate = False
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a child of the package logger, configuring it on first use."""
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = _configure()
    if name == LOGGER_NAME:
        return _LOGGER
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1 :]
    return _LOGGER.getChild(name)


def reset_logging() -> None:
    """Drop cached logger configuration so the environment is re-read."""
    global _LOGGER
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _LOGGER = None


__all__ = ["LOGGER_NAME", "get_logger", "reset_logging"]
