"""Logging setup shared by the CLI and library entrypoints."""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "dotenv_lint"


def configure_logging(
    verbose: bool = False, logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """Configure and return the package logger.

    Messages go to stderr so they never mix with rendered reports. ``verbose``
    lowers the threshold from WARNING to INFO.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
