from __future__ import annotations

import logging
import sys


_LEVELS_BY_VERBOSE = {
    0: logging.WARNING,  # default
    1: logging.INFO,
    2: logging.DEBUG,    # 2 or more → DEBUG
}

LOG_FORMAT = "dua: %(levelname)s: %(message)s"


def setup_logging(verbose_count: int = 0, logger_name: str = "dua") -> logging.Logger:
    """
    Configure the package logger based on -v count.

    -v  → INFO
    -vv → DEBUG
    default → WARNING

    Calling it again replaces the handler it attached before, so the
    handler always writes to the current sys.stderr.
    """
    level = _LEVELS_BY_VERBOSE.get(verbose_count, logging.DEBUG)
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_dua_handler", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler._dua_handler = True  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    logger.addHandler(handler)
    return logger
