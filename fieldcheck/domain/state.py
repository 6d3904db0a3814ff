"""State (region) settings."""

STATE_ISO_CODE_PATTERN = r"^[0-9A-Z-]{1,7}$"
