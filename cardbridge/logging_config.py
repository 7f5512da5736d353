"""Logging configuration for cardbridge."""

import logging
import sys

from cardbridge.config import is_debug


def setup_logging() -> None:
    """Configure process-wide logging.

    Level is DEBUG when the DEBUG env var is "true", otherwise INFO.
    Output goes to stdout.
    """
    log_level = logging.DEBUG if is_debug() else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
