"""Structured logging configuration for the portfolio analytics engine."""

from __future__ import annotations

import logging
import sys

from .config import settings


def setup_logging(
    level: int | str | None = None,
    module_name: str = "src",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    The default ``module_name`` is the package root, so the module loggers
    created with ``logging.getLogger(__name__)`` propagate to it.

    Args:
        level: Logging level; defaults to LOG_LEVEL (INFO). Names such as
            "DEBUG" are accepted.
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
