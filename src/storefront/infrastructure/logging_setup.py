"""Logging for the command-line front end.

One stream handler on the package logger. Quiet by default; ``verbose``
shows every request.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("storefront")
    # Re-running the CLI in one process (tests) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
