#!/usr/bin/env python3
"""
Logging setup for myapp.

Log records always go to stderr; stdout is reserved for command output.
"""

import logging
import sys
from typing import Any, Dict, Optional, TextIO

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(name: Any) -> int:
    """Map a level name (or number) to a logging level; unknowns -> WARNING."""
    if isinstance(name, int) and not isinstance(name, bool):
        return name
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(config: Dict[str, Any], stream: Optional[TextIO] = None) -> int:
    """
    Configure the `myapp` logger hierarchy from `config['logging']['level']`.

    Returns the applied numeric level.
    """
    level = resolve_level(config.get("logging", {}).get("level"))

    logger = logging.getLogger("myapp")
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return level
