"""Logging setup: diagnostics go to stderr so stdout carries only diff output"""

import logging
import sys


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root logger with a single stderr handler and return the app logger."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return logging.getLogger("ddiff")
