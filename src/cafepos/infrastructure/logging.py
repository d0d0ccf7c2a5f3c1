"""Loguru sink configuration for the whole application.

Use-case handlers log through ``loguru.logger`` directly; infrastructure
components take a logger bound to their component name from
``get_logger``.
"""

from __future__ import annotations

import sys

from loguru import logger

from cafepos.infrastructure.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with one at the configured level."""
    log_level = (level or get_config().log_level).upper()
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=LOG_FORMAT)


def get_logger(name: str | None = None):
    """Get the application logger, optionally bound to a component name."""
    if name:
        return logger.bind(name=name)
    return logger
