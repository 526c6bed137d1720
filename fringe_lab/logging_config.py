# fringe_lab/logging_config.py
# Logging setup. Library modules only create module loggers; the CLI (or a
# host application) calls setup_logging once.
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", stream=None) -> logging.Logger:
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level!r}")

    logger = logging.getLogger("fringe_lab")
    logger.setLevel(numeric_level)
    # avoid duplicate handlers when called twice
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
