"""Configuration and shared constants."""

from fieldcheck.config.settings import (
    LOG_LEVEL,
    VERBOSE,
    MATCH_TIMEOUT,
    BACKEND_HOST,
    BACKEND_PORT,
)
from fieldcheck.config.constants import (
    CATALOG_CHARS,
    GENERIC_NAME_CHARS,
    MESSAGE_CHARS,
    NAME_CHARS,
    DEFAULT_VIOLATION_MESSAGE,
)

__all__ = [
    # Settings
    "LOG_LEVEL",
    "VERBOSE",
    "MATCH_TIMEOUT",
    "BACKEND_HOST",
    "BACKEND_PORT",
    # Constants
    "CATALOG_CHARS",
    "GENERIC_NAME_CHARS",
    "MESSAGE_CHARS",
    "NAME_CHARS",
    "DEFAULT_VIOLATION_MESSAGE",
]
