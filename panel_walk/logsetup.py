"""Logging configuration.

The game owns the terminal while it runs, so log records only go to a
file when one is requested.
"""

from __future__ import annotations

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure the root logger for a game session."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler = logging.NullHandler()

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
