"""Unit tests for log.py"""

import logging

from ddiff.log import setup_logging


def test_setup_logging_sets_level():
    logger = setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logger.name == "ddiff"


def test_setup_logging_single_stderr_handler(capsys):
    """Records go to stderr so stdout carries only diff output."""
    setup_logging("INFO")
    assert len(logging.getLogger().handlers) == 1
    logging.getLogger("ddiff.core.compare").info("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello" in captured.err


def test_setup_logging_unknown_level_falls_back():
    setup_logging("nonsense")
    assert logging.getLogger().level == logging.WARNING
