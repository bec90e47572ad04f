"""Logging setup shared by the entry point and the deck modules.

Environment switches:
    LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
"""

import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (main.py)."""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
