"""
ChoiceValidator - validates that a value is one of a declared set of choices.
"""

from typing import Any

from fieldcheck.core.models import ViolationKind

from .base_validator import BaseValidator, InvalidRuleArgument, RuleFailure


class ChoiceValidator(BaseValidator):
    """
    Validates against the space-separated choices of the argument (``oneof=red green``).

    The value's string form is compared, so ``oneof=1 2 3`` accepts the integer 2.
    """

    def validate(self, value: Any, argument: str | None) -> None:
        if argument is None or not argument.split():
            raise InvalidRuleArgument(self.rule_type, argument)

        if value is None:
            return

        choices = argument.split()
        if str(value) not in choices:
            raise RuleFailure(
                ViolationKind.FORMAT_MISMATCH,
                f"value '{value}' must be one of: {', '.join(choices)}",
            )

    @property
    def rule_type(self) -> str:
        return "oneof"
