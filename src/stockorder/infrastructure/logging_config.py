"""Logging setup for the stockorder CLI.

Log records go to stderr so they never interleave with the tables and
receipts written to stdout.

Log Format:
    2026-10-18 10:15:30 [INFO    ] stockorder.domain.model.store - Committed order #1: ...
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Configure the ``stockorder`` logger hierarchy.

    Safe to call more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("stockorder")
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
