"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    BASE_WINDOW_NAME,
    DEFAULT_ENCODING,
    EXIT_KEYWORDS,
    SETTINGS_GEOMETRY,
)
from .logging_setup import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "BASE_WINDOW_NAME",
    "DEFAULT_ENCODING",
    "EXIT_KEYWORDS",
    "SETTINGS_GEOMETRY",
    "configure_logging",
]
