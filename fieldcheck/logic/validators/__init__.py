"""
Field Validators

The TypeMatcher and its rule table, plus host-facing validators.
Custom validators can be added with register_validator().
"""

from typing import Optional

from fieldcheck.logic.validators.base import BaseValidator
from fieldcheck.logic.validators.normalizers import strip_slashes
from fieldcheck.logic.validators.rules import RULES, PatternRule, Polarity, build_rule_table
from fieldcheck.logic.validators.type_matcher import TypeMatcher, ValidationOutcome
from fieldcheck.logic.validators.typed_regex import TypedRegexValidator

_MATCHER = TypeMatcher()

# Registry of built-in validators
_VALIDATORS = {
    "typed_regex": TypedRegexValidator(_MATCHER),
}


def get_matcher() -> TypeMatcher:
    """Get the shared matcher built on the default rule table."""
    return _MATCHER


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator


__all__ = [
    "BaseValidator",
    "PatternRule",
    "Polarity",
    "RULES",
    "TypeMatcher",
    "TypedRegexValidator",
    "ValidationOutcome",
    "build_rule_table",
    "get_matcher",
    "get_validator",
    "register_validator",
    "strip_slashes",
]
