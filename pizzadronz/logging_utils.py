"""Mini README: Application-wide logging helpers for PizzaDronz.

Structure:
    * level_for_environment - maps the settings' environment label to a level.
    * configure_root_logger - attaches the shared handler and sets the level.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Modules call ``get_logger(__name__)`` once at import time and keep the
    result in a module-level ``LOGGER``. Entry points call
    ``configure_root_logger(level_for_environment(settings.environment))``
    to pick verbosity; the handler is attached only once, later calls just
    adjust the level, so reloading modules under uvicorn never stacks handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}


def level_for_environment(environment: str) -> int:
    """Return the log level for an environment label, INFO when unknown."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: Optional[int] = None) -> None:
    """Attach a single stream handler; apply ``level`` whenever one is given."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO if level is None else level)
        _LOGGER_INITIALISED = True
    elif level is not None:
        root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, configuring the root logger on first use."""

    configure_root_logger()
    return logging.getLogger(name)
