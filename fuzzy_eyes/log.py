"""Console logging setup."""
from __future__ import annotations
import logging

LOG_FORMAT = "  [%(levelname).1s] %(name)s: %(message)s"

_configured = False


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger (once) and set its level."""
    global _configured
    logger = logging.getLogger("fuzzy_eyes")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _configured = True
    return logger
