"""Logging setup."""

import logging

from core.observability import setup_logging


def test_setup_logging_installs_one_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    level = root.level

    try:
        setup_logging("debug")
        setup_logging("warning")

        assert len(root.handlers) <= before + 1
        assert root.level == logging.WARNING
    finally:
        root.setLevel(level)
