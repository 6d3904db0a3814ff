"""Matching logic: field types, errors, pattern rules and validators."""

from fieldcheck.logic.field_types import FieldType, defined_types
from fieldcheck.logic.errors import (
    FieldCheckError,
    UnknownTypeError,
    InvalidInputError,
    ConfigurationError,
    PatternEngineError,
)

__all__ = [
    "FieldType",
    "defined_types",
    "FieldCheckError",
    "UnknownTypeError",
    "InvalidInputError",
    "ConfigurationError",
    "PatternEngineError",
]
