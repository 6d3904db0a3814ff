"""
Errors

Every error here is a programmer or configuration error and propagates
to the caller as-is. A value that does not conform to its pattern is not
an error; it is a negative validation result.
"""

from typing import Any, Optional, Sequence


class FieldCheckError(Exception):
    """Base class for all field check errors."""


class UnknownTypeError(FieldCheckError, ValueError):
    """The requested field type is not in the rule table."""

    def __init__(self, field_type: Any, defined_types: Sequence[str]):
        self.field_type = field_type
        self.defined_types = list(defined_types)
        super().__init__(
            f'Type "{field_type}" is not defined. '
            f'Defined types are: {", ".join(self.defined_types)}'
        )


class InvalidInputError(FieldCheckError, TypeError):
    """The value is neither absent nor a string."""

    def __init__(self, value: Any):
        self.value_type = type(value).__name__
        super().__init__(f"Expected a string value, got {self.value_type}")


class ConfigurationError(FieldCheckError):
    """The rule table is incomplete or otherwise unusable."""


class PatternEngineError(ConfigurationError):
    """The regex engine failed to compile or evaluate a pattern."""

    def __init__(self, message: str, pattern: Optional[str] = None):
        self.pattern = pattern
        super().__init__(message)
