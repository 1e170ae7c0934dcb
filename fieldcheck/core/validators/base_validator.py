"""
Base validator interface for all rule implementations.

All rules must inherit from BaseValidator and implement the validate() method.
A validator is stateless with respect to records: one instance is shared by
every field and every validation call that uses its rule name.
"""

import math
from abc import ABC, abstractmethod
from typing import Any

from fieldcheck.core.models import ViolationKind


class RuleFailure(Exception):
    """Raised by a validator when the value does not satisfy the rule."""

    def __init__(self, kind: ViolationKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}")


class InvalidRuleArgument(ValueError):
    """Raised by a validator when its declaration argument cannot be parsed."""

    def __init__(self, rule_type: str, argument: str | None):
        self.rule_type = rule_type
        self.argument = argument
        super().__init__(f"invalid argument for '{rule_type}': {argument!r}")


class BaseValidator(ABC):
    """
    Abstract base class for all rule implementations.

    Each validator implements one rule type (required, min, max, email, ...).
    """

    @abstractmethod
    def validate(self, value: Any, argument: str | None) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate (None when absent)
            argument: The raw declaration argument, None for a bare rule

        Raises:
            RuleFailure: If validation fails
            InvalidRuleArgument: If the argument cannot be parsed
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type})"


def parse_number(rule_type: str, argument: str | None) -> int | float:
    """
    Parse a numeric rule argument.

    Integers are kept as int so length comparisons stay exact.

    Raises:
        InvalidRuleArgument: If the argument is missing, empty, non-numeric or not finite
    """
    if argument is None or not argument.strip():
        raise InvalidRuleArgument(rule_type, argument)

    text = argument.strip()
    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        raise InvalidRuleArgument(rule_type, argument)

    if not math.isfinite(number):
        raise InvalidRuleArgument(rule_type, argument)
    return number
