"""Centralized logger configuration.

Usage:
    from artic_selector.utils.logger import get_logger
    logger = get_logger(__name__)

This avoids sprinkling basicConfig calls throughout the codebase.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("ARTIC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL, verbose: bool = False) -> None:
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
