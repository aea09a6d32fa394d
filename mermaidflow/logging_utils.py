"""Logging helpers for the command line tool."""

import logging
import os
import sys
from typing import Optional

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> int:
    """Configure a single stderr handler for the mermaidflow loggers.

    The level comes from `level`, then MERMAIDFLOW_LOG_LEVEL, then WARNING.
    Calling this more than once only adjusts the level.
    """
    global _CONFIGURED
    level_name = (level or os.environ.get("MERMAIDFLOW_LOG_LEVEL", "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger("mermaidflow")
    logger.setLevel(resolved)
    if _CONFIGURED:
        return resolved

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _CONFIGURED = True
    logger.debug("Logging initialized at %s", logging.getLevelName(resolved))
    return resolved
