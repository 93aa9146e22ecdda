"""Logging setup for the IMS console session."""

from __future__ import annotations

import logging
import sys

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_console_handler: logging.Handler | None = None


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Send log records to stderr so they never mix with the menu output.

    Unknown level names fall back to WARNING.  Calling this again replaces
    the handler installed by the previous call.
    """
    global _console_handler

    if log_level.upper() not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using WARNING", file=sys.stderr)
        log_level = "WARNING"
    numeric_level = getattr(logging, log_level.upper())

    if _console_handler is not None:
        logging.root.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _console_handler.setLevel(numeric_level)
    logging.root.addHandler(_console_handler)
    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("ims")
    logger.setLevel(logging.NOTSET)
    logger.debug("Logging initialized at %s", log_level.upper())
    return logger
