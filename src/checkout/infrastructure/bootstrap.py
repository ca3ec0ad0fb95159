"""Composition root: wires runtime services for the CLI.

This is the only place that decides where the current time comes from
and how logging is set up. Everything else receives them as arguments.
"""

from __future__ import annotations

import logging
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def system_clock() -> datetime:
    return datetime.now()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr so receipts on stdout stay clean."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("checkout").setLevel(level.upper())
