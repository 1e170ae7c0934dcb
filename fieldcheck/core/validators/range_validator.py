"""
Bound validators - min, max and len over string lengths, collection sizes and numbers.
"""

import math
from abc import abstractmethod
from collections.abc import Sized
from decimal import Decimal
from numbers import Real
from typing import Any

from fieldcheck.core.models import ViolationKind

from .base_validator import BaseValidator, RuleFailure, parse_number


class BoundValidator(BaseValidator):
    """
    Compares a measure of the value against a numeric bound.

    The measure is:
    - len(value) for strings and other sized collections
    - the value itself for real numbers

    None is skipped (handled by the required rule). Booleans, NaN and other
    types have no measure and fail with a format mismatch.
    """

    def validate(self, value: Any, argument: str | None) -> None:
        # Argument problems are reported even for absent values
        bound = parse_number(self.rule_type, argument)

        if value is None:
            return

        measure, what = self._measure(value)
        self._check(measure, bound, what)

    def _measure(self, value: Any) -> tuple[int | float, str]:
        if isinstance(value, bool):
            raise RuleFailure(
                ViolationKind.FORMAT_MISMATCH,
                f"'{self.rule_type}' does not apply to bool",
            )
        if isinstance(value, Decimal) and value.is_nan():
            raise RuleFailure(ViolationKind.FORMAT_MISMATCH, "value is not a number")
        if isinstance(value, Real) and math.isnan(value):
            raise RuleFailure(ViolationKind.FORMAT_MISMATCH, "value is not a number")
        if isinstance(value, (Real, Decimal)):
            return value, "value"
        if isinstance(value, Sized):
            return len(value), "length"
        raise RuleFailure(
            ViolationKind.FORMAT_MISMATCH,
            f"'{self.rule_type}' does not apply to {type(value).__name__}",
        )

    @abstractmethod
    def _check(self, measure: int | float, bound: int | float, what: str) -> None:
        pass


class MinValidator(BoundValidator):
    """Fails if the length (strings, collections) or value (numbers) is below N."""

    def _check(self, measure: int | float, bound: int | float, what: str) -> None:
        if measure < bound:
            raise RuleFailure(
                ViolationKind.OUT_OF_RANGE,
                f"{what} {measure} is less than minimum {bound}",
            )

    @property
    def rule_type(self) -> str:
        return "min"


class MaxValidator(BoundValidator):
    """Fails if the length (strings, collections) or value (numbers) is above N."""

    def _check(self, measure: int | float, bound: int | float, what: str) -> None:
        if measure > bound:
            raise RuleFailure(
                ViolationKind.OUT_OF_RANGE,
                f"{what} {measure} exceeds maximum {bound}",
            )

    @property
    def rule_type(self) -> str:
        return "max"


class LengthValidator(BoundValidator):
    """Fails unless the length (strings, collections) or value (numbers) equals N exactly."""

    def _check(self, measure: int | float, bound: int | float, what: str) -> None:
        if measure != bound:
            raise RuleFailure(
                ViolationKind.OUT_OF_RANGE,
                f"{what} {measure} must be exactly {bound}",
            )

    @property
    def rule_type(self) -> str:
        return "len"
