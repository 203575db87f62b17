"""Logging helpers from Clopt."""

import logging
import sys
from typing import TextIO

BASE_LOGGER_NAME: str = "clopt"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger namespaced under 'clopt'.
    """
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def setup_logger(level: int | str = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """
    Configures the base 'clopt' logger once and returns it.
    Later calls only update the level.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base
