"""Logging setup. Records go to stderr so the printed report on stdout stays fixed."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Set the bookpricing logger level and (re)attach its stderr handler."""
    logger = logging.getLogger("bookpricing")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    # replace our handler: sys.stderr may have been swapped since the last call
    for handler in [h for h in logger.handlers if getattr(h, "_bookpricing", False)]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._bookpricing = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
