"""Typed Regex Validator"""

from typing import Tuple, Optional

from fieldcheck.config.constants import DEFAULT_VIOLATION_MESSAGE
from fieldcheck.logic.validators.base import BaseValidator
from fieldcheck.logic.validators.type_matcher import TypeMatcher


def format_value(value: str) -> str:
    return f'"{value}"'


class TypedRegexValidator(BaseValidator):
    """
    Validates a value against the pattern of a configured field type.

    Expects ``type`` in the validator config; ``message`` may override
    the violation message, where %s stands for the normalized value.
    """

    def __init__(self, matcher: Optional[TypeMatcher] = None):
        self.matcher = matcher or TypeMatcher()

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        field_type = kwargs.get("type")
        message = kwargs.get("message", DEFAULT_VIOLATION_MESSAGE)

        outcome = self.matcher.validate(field_type, value)
        if outcome.valid:
            return True, None

        return False, message.replace("%s", format_value(outcome.normalized_value))
