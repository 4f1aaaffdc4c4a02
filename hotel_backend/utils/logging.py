"""Shared ``hotel_backend`` logger for the API, repository and maintenance scripts."""

from __future__ import annotations

import logging
import os
from typing import Optional

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(namespace: str = "hotel_backend", level: Optional[str] = None) -> logging.Logger:
    """Attach the stream handler to the ``hotel_backend`` logger once.

    Rejected API requests, repository writes and store failures, and the seed
    and migrate progress lines all go through children of this logger. The
    level comes from ``Settings.log_level`` when the scripts pass it, otherwise
    from ``LOG_LEVEL``. Calling it again only adjusts the level.
    """

    logger = logging.getLogger(namespace)
    if level:
        logger.setLevel(level.upper())
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel((level or _LOG_LEVEL).upper())
    logger.propagate = False
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Child of the shared logger, e.g. ``get_logger("db.repo")``."""

    base = configure_logging()
    if child:
        return base.getChild(child)
    return base


__all__ = ["configure_logging", "get_logger"]
