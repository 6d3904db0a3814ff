"""
Patterns owned by other domain areas.

The rule table references these as opaque pattern strings.
"""

from fieldcheck.domain.address import DNI_LITE_PATTERN
from fieldcheck.domain.currency import ALPHA_ISO_CODE_PATTERN
from fieldcheck.domain.language import ISO_CODE_PATTERN
from fieldcheck.domain.product import (
    UPC_PATTERN,
    EAN_13_PATTERN,
    ISBN_PATTERN,
    REFERENCE_PATTERN,
)
from fieldcheck.domain.state import STATE_ISO_CODE_PATTERN

__all__ = [
    "DNI_LITE_PATTERN",
    "ALPHA_ISO_CODE_PATTERN",
    "ISO_CODE_PATTERN",
    "UPC_PATTERN",
    "EAN_13_PATTERN",
    "ISBN_PATTERN",
    "REFERENCE_PATTERN",
    "STATE_ISO_CODE_PATTERN",
]
