"""Mini README: Application-wide logging helpers for Pocket Ledger.

Structure:
    * parse_level - turn level names, numbers or ``POCKETLEDGER_LOG_LEVEL`` into an int.
    * configure_root_logger - attaches one formatted handler to the root logger.
    * get_logger - factory returning module loggers after baseline setup.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The first call
    installs the handler; an explicit ``configure_root_logger(level)`` from
    the launcher afterwards only adjusts the level, so handlers never stack.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "POCKETLEDGER_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"

_HANDLER: Optional[logging.Handler] = None


def parse_level(level: Union[int, str, None] = None) -> int:
    """Resolve ``level`` to a numeric logging level, defaulting to INFO."""

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
        if not level:
            return logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Install the ledger's handler on the root logger and set its level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(parse_level(level))
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
