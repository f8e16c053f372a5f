"""
Centralized logging for didyoumean.

Every module asks for a child of the package logger::

    from didyoumean.utils.log import get_logger
    logger = get_logger(__name__)

Records go to stderr so they never mix with suggestions printed on stdout.
Default level is WARNING; the CLI ``--log-level`` option changes it.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ROOT_LOGGER_NAME = "didyoumean"

_initialized = False


def _resolve_level(level: str) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def _setup_root_logger(level: str | None = None) -> logging.Logger:
    """Configure the package root logger (idempotent)."""
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if _initialized:
        if level is not None:
            root.setLevel(_resolve_level(level))
        return root

    root.setLevel(_resolve_level(level or DEFAULT_LOG_LEVEL))
    root.propagate = False
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    _initialized = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger of ``didyoumean`` for the given module name."""
    _setup_root_logger()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the effective log level for the whole package at runtime."""
    root = _setup_root_logger(level)
    root.debug("Log level changed to %s", level.upper())
