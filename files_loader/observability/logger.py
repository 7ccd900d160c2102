"""Logging for the files_loader package.

Every logger lives under the ``files_loader`` hierarchy. Only the package
root owns a stderr handler; component loggers propagate to it, so a level set
on one component does not affect the others.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER_NAME = "files_loader"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.propagate = False
    if root.level == logging.NOTSET:
        root.setLevel(logging.INFO)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        root.addHandler(handler)
    return root


def get_logger(name: str = ROOT_LOGGER_NAME, level: Optional[str] = None) -> logging.Logger:
    """Return a logger in the package hierarchy.

    Args:
        name: Component name (e.g. "loader"); prefixed with ``files_loader.``
            unless it already is.
        level: Optional level string (e.g. "DEBUG") for this logger only.
    """
    root = _root_logger()
    if name == ROOT_LOGGER_NAME:
        logger = root
    else:
        if not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level.upper())
    return logger


def get_logger_from_settings(settings: Any, name: str) -> logging.Logger:
    """Return `name`'s logger at `settings.observability.log_level`, if set."""
    observability = getattr(settings, "observability", None)
    return get_logger(name, getattr(observability, "log_level", None))
