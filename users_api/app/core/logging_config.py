"""
Logging setup for the Users API.

Handlers are attached to the ``users_api`` package logger rather than
the root logger, so the service's records are formatted consistently
while anything the host (uvicorn, pytest) installs on the root logger
keeps working through propagation.
"""

import logging
from pathlib import Path

from .config import Settings

LOGGER_NAME = "users_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings) -> logging.Logger:
    """Configure the ``users_api`` logger from ``config`` and return it.

    ``config.log_level`` sets the level (unknown names mean ``INFO``).
    A console handler is always added; a file handler is added when
    ``config.log_file`` is set.  Calling this again once handlers are
    attached only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
