"""
Global settings loaded from environment variables.

All settings have sensible defaults so the library works out of the box.
Override via environment variables.
"""

import os
from typing import Optional


def _optional_seconds(raw: str) -> Optional[float]:
    seconds = float(raw)
    return seconds if seconds > 0 else None


# =============================================================================
# Matching
# =============================================================================
# Per-evaluation engine timeout in seconds; 0 disables it.
MATCH_TIMEOUT = _optional_seconds(os.getenv("FIELDCHECK_MATCH_TIMEOUT", "0"))

# =============================================================================
# Backend Service
# =============================================================================
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10822"))

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
