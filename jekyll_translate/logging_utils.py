"""Logging helpers shared across the package."""

from __future__ import annotations

import logging

LOGGER_NAME = "jekyll_translate"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def log(message: str, level: int = logging.INFO) -> None:
    """Log a message on the package logger."""
    logger.log(level, message)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    # Keep urllib3 connection chatter out of debug output
    logging.getLogger("urllib3").setLevel(logging.WARNING)
