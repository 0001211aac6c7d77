"""Logging configuration for got."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "got"


def setup_logging(verbose: int = 0, quiet: bool = False) -> logging.Logger:
    """
    Configure the got logger.

    Output goes to stderr: stdout carries command results only.

    Args:
        verbose: 1 for INFO, 2 or more for DEBUG (default is WARNING)
        quiet: If True, only show errors

    Returns:
        Configured logger instance
    """
    if quiet:
        effective_level = logging.ERROR
    elif verbose == 1:
        effective_level = logging.INFO
    elif verbose >= 2:
        effective_level = logging.DEBUG
    else:
        effective_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(effective_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(effective_level)
    if effective_level <= logging.DEBUG:
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(levelname)-8s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under got, e.g. got.repo."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
