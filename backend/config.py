"""
Backend Configuration

API settings for the validation service.
"""

import os

from fieldcheck import __version__
from fieldcheck.config.settings import BACKEND_HOST, BACKEND_PORT, LOG_LEVEL, VERBOSE

# API Settings
API_TITLE = "Field Check"
API_DESCRIPTION = "Typed regular-expression validation for form fields"
API_VERSION = __version__

# Batch limit per request
MAX_BATCH_ITEMS = int(os.getenv("MAX_BATCH_ITEMS", "500"))

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "BACKEND_HOST",
    "BACKEND_PORT",
    "MAX_BATCH_ITEMS",
    "LOG_LEVEL",
    "VERBOSE",
]
