"""
FunctionValidator - adapts a plain Python function into a rule implementation.
"""

from collections.abc import Callable
from typing import Any

from fieldcheck.core.models import ViolationKind

from .base_validator import BaseValidator, InvalidRuleArgument, RuleFailure


class FunctionValidator(BaseValidator):
    """
    Validates using a custom rule function.

    The function signature should be:
        def my_rule(value: Any, argument: str | None) -> bool | tuple[bool, str | None] | None:
            ...

    Return values:
    - None or True: the rule passes
    - False: the rule fails with the default error message
    - (ok, reason): the rule fails when ok is falsy, with reason as message

    A function may also raise RuleFailure or InvalidRuleArgument directly.
    Any other exception is reported as a failure of the rule.
    """

    def __init__(self, name: str, func: Callable[[Any, str | None], Any], error_message: str | None = None):
        if not callable(func):
            raise ValueError("func must be callable")

        self.name = name
        self.func = func
        self.error_message = error_message or f"failed rule '{name}'"

    def validate(self, value: Any, argument: str | None) -> None:
        try:
            outcome = self.func(value, argument)
        except (RuleFailure, InvalidRuleArgument):
            raise
        except Exception as e:
            raise RuleFailure(ViolationKind.RULE_FAILED, f"{self.error_message}: {str(e)}")

        if outcome is None or outcome is True:
            return

        if isinstance(outcome, tuple):
            ok, reason = outcome
            if not ok:
                raise RuleFailure(ViolationKind.RULE_FAILED, reason or self.error_message)
            return

        if not outcome:
            raise RuleFailure(ViolationKind.RULE_FAILED, self.error_message)

    @property
    def rule_type(self) -> str:
        return self.name
