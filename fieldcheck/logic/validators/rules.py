"""
Pattern Rules

Static table mapping every FieldType to exactly one PatternRule.

Patterns are compiled with the third-party ``regex`` engine, which
supports Unicode property classes (``\\pL``, ``\\pS``) and per-call
timeouts. Non-Unicode rules are compiled ASCII-only so that
case-insensitive matching never folds non-ASCII letters.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

import regex

from fieldcheck.domain import (
    ALPHA_ISO_CODE_PATTERN,
    DNI_LITE_PATTERN,
    EAN_13_PATTERN,
    ISBN_PATTERN,
    ISO_CODE_PATTERN,
    REFERENCE_PATTERN,
    STATE_ISO_CODE_PATTERN,
    UPC_PATTERN,
)
from fieldcheck.logic.errors import ConfigurationError, PatternEngineError
from fieldcheck.logic.field_types import FieldType
from fieldcheck.logic.validators.normalizers import strip_slashes

logger = logging.getLogger(__name__)


class Polarity(str, Enum):
    """Whether a value is valid when the pattern matches, or when it does not."""

    REQUIRE_MATCH = "require_match"
    REQUIRE_NO_MATCH = "require_no_match"

    def apply(self, matched: bool) -> bool:
        if self is Polarity.REQUIRE_NO_MATCH:
            return not matched
        return matched


@dataclass(frozen=True)
class PatternRule:
    """A pattern, its matching polarity and an optional pre-match normalizer."""

    pattern: str
    polarity: Polarity = Polarity.REQUIRE_MATCH
    unicode: bool = False
    ignore_case: bool = False
    normalizer: Optional[Callable[[str], str]] = None
    compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        flags = regex.UNICODE if self.unicode else regex.ASCII
        if self.ignore_case:
            flags |= regex.IGNORECASE

        try:
            compiled = regex.compile(self.pattern, flags)
        except regex.error as e:
            logger.error(f"Pattern failed to compile: {self.pattern!r}: {e}")
            raise PatternEngineError(
                f"Invalid pattern {self.pattern!r}: {e}", self.pattern
            ) from e

        object.__setattr__(self, "compiled", compiled)

    @property
    def normalized(self) -> bool:
        return self.normalizer is not None

    def normalize(self, value: str) -> str:
        if self.normalizer is None:
            return value
        return self.normalizer(value)

    def matches(self, value: str, timeout: Optional[float] = None) -> bool:
        """
        Search the value for the pattern anywhere; anchoring is up to the pattern.

        Raises:
            PatternEngineError: if the engine fails or times out.
        """
        try:
            return self.compiled.search(value, timeout=timeout) is not None
        except TimeoutError as e:
            logger.error(f"Pattern timed out after {timeout}s: {self.pattern!r}")
            raise PatternEngineError(
                f"Pattern {self.pattern!r} timed out after {timeout}s", self.pattern
            ) from e


def build_rule_table(rules: Mapping[FieldType, PatternRule]) -> Mapping[FieldType, PatternRule]:
    """
    Freeze a rule mapping after checking it covers every FieldType.

    Raises:
        ConfigurationError: if a field type has no rule or a key is not a FieldType.
    """
    unexpected = [key for key in rules if not isinstance(key, FieldType)]
    if unexpected:
        raise ConfigurationError(f"Rule table keys must be FieldType members, got: {unexpected}")

    missing = [member.value for member in FieldType if member not in rules]
    if missing:
        raise ConfigurationError(f"No pattern rule for field types: {', '.join(missing)}")

    return MappingProxyType(dict(rules))


RULES = build_rule_table({
    FieldType.NAME: PatternRule(
        r'^[^0-9!<>,;?=+()@#"°{}_$%:¤|]*$', unicode=True, normalizer=strip_slashes
    ),
    FieldType.CATALOG_NAME: PatternRule(r"^[^<>;=#{}]*$", unicode=True),
    FieldType.GENERIC_NAME: PatternRule(r"^[^<>={}]*$", unicode=True),
    FieldType.CITY_NAME: PatternRule(r'^[^!<>;?=+@#"°{}_$%]*$', unicode=True),
    FieldType.ADDRESS: PatternRule(r"^[^!<>?=+@{}_$%]*$", unicode=True),
    FieldType.POST_CODE: PatternRule(r"^[a-zA-Z 0-9-]+$"),
    FieldType.PHONE_NUMBER: PatternRule(r"^[+0-9. ()/-]*$"),
    # Forbidden sequences may appear anywhere, so this one is not anchored
    FieldType.MESSAGE: PatternRule(
        r"[<>{}]", polarity=Polarity.REQUIRE_NO_MATCH, ignore_case=True
    ),
    FieldType.LANGUAGE_ISO_CODE: PatternRule(ISO_CODE_PATTERN),
    FieldType.LANGUAGE_CODE: PatternRule(r"^[a-zA-Z]{2}(-[a-zA-Z]{2})?$"),
    FieldType.CURRENCY_ISO_CODE: PatternRule(ALPHA_ISO_CODE_PATTERN),
    FieldType.FILE_NAME: PatternRule(r"^[a-zA-Z0-9_.-]+$"),
    FieldType.DNI_LITE: PatternRule(DNI_LITE_PATTERN),
    FieldType.STATE_ISO_CODE: PatternRule(STATE_ISO_CODE_PATTERN),
    FieldType.UPC: PatternRule(UPC_PATTERN),
    FieldType.EAN_13: PatternRule(EAN_13_PATTERN),
    FieldType.ISBN: PatternRule(ISBN_PATTERN),
    FieldType.REFERENCE: PatternRule(REFERENCE_PATTERN, unicode=True),
    FieldType.MODULE_NAME: PatternRule(r"^[a-zA-Z0-9_-]+$"),
    FieldType.URL: PatternRule(
        r"^[~:#,$%&_=\(\)\.\? \+\-@/a-zA-Z0-9\pL\pS-]+$", unicode=True
    ),
    FieldType.WEBSERVICE_KEY: PatternRule(r"^[a-zA-Z0-9@#?\-_]+$", ignore_case=True),
})
