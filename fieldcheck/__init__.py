"""
Field Check

Typed regular-expression validation for application form fields.
Each field type resolves to one static pattern rule (pattern, polarity,
optional normalizer); a value either conforms to it or it does not.
"""

from fieldcheck.logic.field_types import FieldType, defined_types
from fieldcheck.logic.errors import (
    FieldCheckError,
    UnknownTypeError,
    InvalidInputError,
    ConfigurationError,
    PatternEngineError,
)
from fieldcheck.logic.validators import (
    TypeMatcher,
    ValidationOutcome,
    TypedRegexValidator,
    get_matcher,
    get_validator,
)

__version__ = "1.0.0"

__all__ = [
    "FieldType",
    "defined_types",
    "FieldCheckError",
    "UnknownTypeError",
    "InvalidInputError",
    "ConfigurationError",
    "PatternEngineError",
    "TypeMatcher",
    "ValidationOutcome",
    "TypedRegexValidator",
    "get_matcher",
    "get_validator",
]
