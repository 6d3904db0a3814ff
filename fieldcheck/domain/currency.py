"""Currency identifiers."""

ALPHA_ISO_CODE_PATTERN = r"^[a-zA-Z]{2,3}$"
