"""
Base Validator

Interface the host application calls for every configured field.
"""

from abc import ABC, abstractmethod
from typing import Tuple, Optional


class BaseValidator(ABC):
    """
    Host-facing field validator.

    Implementations return a (is_valid, error_message) pair; the message is
    only set for invalid values and is ready to show to the user.
    """

    @abstractmethod
    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        """
        Validate a field value.

        Args:
            value: The raw field value; None or "" means the field was left blank
            **kwargs: Validator config from the host. TypedRegexValidator reads
                ``type`` (field type identifier, required) and ``message``
                (violation template, %s is replaced by the quoted value).

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
        """
        pass
