"""
Process-wide logging setup, called once from the app lifespan.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> None:
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
