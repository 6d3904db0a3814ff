"""
Product identifier patterns.

Barcode fields may be left blank, hence the zero lower bounds.
REFERENCE_PATTERN is matched Unicode-aware; the others are ASCII.
"""

UPC_PATTERN = r"^[0-9]{0,12}$"
EAN_13_PATTERN = r"^[0-9]{0,13}$"
ISBN_PATTERN = r"^[0-9-]{0,32}$"
REFERENCE_PATTERN = r"^[^<>;={}]*$"
