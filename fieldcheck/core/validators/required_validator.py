"""
RequiredValidator - ensures a field is present and not its type's zero value.
"""

from collections.abc import Sized
from decimal import Decimal
from numbers import Number
from typing import Any

from fieldcheck.core.models import ViolationKind

from .base_validator import BaseValidator, RuleFailure


def is_zero_value(value: Any) -> bool:
    """
    Return True for absent or zero values.

    Zero values: None, False, numeric zero, empty strings and empty collections.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, Decimal) and value.is_nan():
        return False
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class RequiredValidator(BaseValidator):
    """
    Validates that a field is present and not its zero value.

    Fails if:
    - Field is missing from the record, or None
    - Field value is an empty string or empty collection
    - Field value is numeric zero or False

    The rule takes no argument; any argument given is ignored.
    """

    def validate(self, value: Any, argument: str | None) -> None:
        if value is None:
            raise RuleFailure(ViolationKind.MISSING_REQUIRED_VALUE, "value is required")

        if is_zero_value(value):
            raise RuleFailure(
                ViolationKind.MISSING_REQUIRED_VALUE,
                f"value is required, got zero value {value!r}",
            )

    @property
    def rule_type(self) -> str:
        return "required"
