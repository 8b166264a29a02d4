"""Logging helpers.

Diagnostics always go to stderr: in ``--stdout`` mode, stdout carries
nothing but candidate names.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "subdomain_maker"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr; DEBUG when verbose, INFO otherwise."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    get_logger().setLevel(level)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
