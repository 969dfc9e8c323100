"""
Diagnostic logging for pagescope.

All pagescope modules log beneath the ``pagescope`` logger. The first call
to :func:`get_logger` installs a stderr handler using the configured format
and level; :func:`reset_logger` removes it again so tests can start from a
clean slate.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pagescope.config.defaults import LOGGER_NAME

_handler: Optional[logging.Handler] = None


def _setup() -> logging.Logger:
    global _handler
    from pagescope.config.settings import get_config

    config = get_config().logging
    root = logging.getLogger(LOGGER_NAME)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    root.addHandler(handler)
    root.setLevel(config.level.value)
    _handler = handler
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a pagescope logger, setting up the handler on first use.

    Args:
        name: Dotted logger name beneath ``pagescope`` (usually ``__name__``).

    Returns:
        Logger instance.
    """
    if _handler is None:
        _setup()
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``pagescope`` logger.

    Args:
        level: Level number or name (case-insensitive).
    """
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(LOGGER_NAME).setLevel(level)


def reset_logger() -> None:
    """Remove the installed handler and clear the logger level."""
    global _handler
    root = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()
        _handler = None
    root.setLevel(logging.NOTSET)


__all__ = [
    "get_logger",
    "set_log_level",
    "reset_logger",
]
