from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(name: str | None, default: int = logging.WARNING) -> int:
    """Map a level name from config (e.g. "debug", "INFO") to a logging level."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: str | int | None = None) -> None:
    """Diagnostics go to stderr; user-facing status lines are printed separately."""
    if not isinstance(level, int):
        level = resolve_level(level)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
