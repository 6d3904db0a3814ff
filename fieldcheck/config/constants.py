"""
Shared constants used across the library.

The character-set strings list what the corresponding field types forbid.
They are exposed for callers that build their own hints or patterns.
"""

# Forbidden characters per field family
CATALOG_CHARS = "<>;=#{}"
GENERIC_NAME_CHARS = "<>={}"
MESSAGE_CHARS = "<>{}"
NAME_CHARS = '0-9!<>,;?=+()@#"°{}_$%:'

# Violation message used when the caller supplies none; %s is the value
DEFAULT_VIOLATION_MESSAGE = "%s is invalid."
