"""
Type Matcher

Checks a string value against the pattern rule of a field type:
empty values pass, the value is normalized, the rule's pattern is searched,
and the rule's polarity turns the match into a verdict.

Stateless apart from the read-only rule table, so a single instance can be
shared across threads.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from fieldcheck.config.settings import MATCH_TIMEOUT
from fieldcheck.logic.errors import InvalidInputError, UnknownTypeError
from fieldcheck.logic.field_types import FieldType
from fieldcheck.logic.validators.rules import RULES, PatternRule, build_rule_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict plus the normalized value, which is what violation messages show."""

    valid: bool
    normalized_value: Optional[str]


class TypeMatcher:
    """
    Validates values against the rule of their field type.

    Args:
        rules: Optional replacement rule table; must cover every FieldType.
        timeout: Per-evaluation engine timeout in seconds, None for no limit.
    """

    def __init__(
        self,
        rules: Optional[Mapping[FieldType, PatternRule]] = None,
        timeout: Optional[float] = MATCH_TIMEOUT,
    ):
        self._rules = RULES if rules is None else build_rule_table(rules)
        self._timeout = timeout

    @property
    def rules(self) -> Mapping[FieldType, PatternRule]:
        return self._rules

    def get_rule(self, field_type: Union[FieldType, str]) -> PatternRule:
        try:
            resolved = FieldType.resolve(field_type)
        except UnknownTypeError:
            logger.warning(f"Unknown field type requested: {field_type!r}")
            raise
        return self._rules[resolved]

    def validate(self, field_type: Union[FieldType, str], value: Any) -> ValidationOutcome:
        """
        Check a value and return the verdict with the normalized value.

        Raises:
            InvalidInputError: value is neither None nor a string.
            UnknownTypeError: field_type is not defined.
            PatternEngineError: the engine failed while matching.
        """
        # Presence is the host's concern, not ours
        if value is None or (isinstance(value, str) and value == ""):
            return ValidationOutcome(valid=True, normalized_value=value)

        if not isinstance(value, str):
            raise InvalidInputError(value)

        rule = self.get_rule(field_type)
        normalized = rule.normalize(value)
        matched = rule.matches(normalized, timeout=self._timeout)
        valid = rule.polarity.apply(matched)

        logger.debug(
            f"Checked {field_type!s} value: matched={matched} "
            f"polarity={rule.polarity.value} valid={valid}"
        )
        return ValidationOutcome(valid=valid, normalized_value=normalized)

    def is_valid(self, field_type: Union[FieldType, str], value: Any) -> bool:
        return self.validate(field_type, value).valid
