"""Language identifiers."""

ISO_CODE_PATTERN = r"^[a-zA-Z]{2,3}$"
