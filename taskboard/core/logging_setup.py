# File: taskboard/core/logging_setup.py

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the ``taskboard`` logger tree with a single stderr handler.

    Safe to call more than once (the app factory runs once per app, and the
    test suite builds several apps); later calls only adjust the level.
    """
    global _configured

    logger = logging.getLogger("taskboard")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    # Let pytest's caplog (attached to root) still see our records.
    logger.propagate = True

    _configured = True
