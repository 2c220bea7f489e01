"""Simple logging utilities for taiga-selector."""

import logging
import sys

PACKAGE_LOGGER = "taiga_selector"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def set_verbosity(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger level from CLI flags.

    Library modules log through ``logging.getLogger(__name__)`` and
    propagate here.
    """
    logger = get_logger(PACKAGE_LOGGER)
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
