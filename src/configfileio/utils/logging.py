"""Logging setup for the command line tool."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``configfileio`` logger with a console handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("configfileio")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)


__all__ = ["setup_logging"]
