"""
Utility module for logging configuration.

This module configures the logging system for seo-ai.
"""

import logging
import sys


def setup_logging(level=logging.INFO):
    """
    Configure logging for seo-ai.

    Calling it again only updates the level, so the CLI can raise verbosity
    after the first setup without duplicating handlers.

    Args:
        level (int): Logging level (default: logging.INFO)
    """
    # Create logger
    logger = logging.getLogger("seoai")
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    # Create console handler and set level
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Add formatter to console handler
    console_handler.setFormatter(formatter)

    # Add console handler to logger
    logger.addHandler(console_handler)

    return logger
