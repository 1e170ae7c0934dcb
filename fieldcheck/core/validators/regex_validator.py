"""
RegexValidator - validates string values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from fieldcheck.core.models import ViolationKind

from .base_validator import BaseValidator, RuleFailure

# local-part "@" domain with at least one dot; no full RFC 5322 claim
EMAIL_PATTERN = (
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)+"
)


class RegexValidator(BaseValidator):
    """
    Validates that a string value fully matches a regular expression pattern.

    The pattern is fixed when the validator is built, so a pattern rule is
    registered under its own name, e.g.
    ``registry.register("zipcode", RegexValidator(r"\\d{5}", name="zipcode"))``.
    The declaration argument is ignored.

    None and the empty string pass: absence is not a format violation.
    """

    def __init__(self, pattern: str | Pattern, flags: int = 0, name: str = "regex"):
        try:
            if isinstance(pattern, str):
                self.pattern: Pattern = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")
        self._name = name

    def validate(self, value: Any, argument: str | None) -> None:
        if value is None or value == "":
            return

        if not isinstance(value, str):
            raise RuleFailure(
                ViolationKind.FORMAT_MISMATCH,
                f"expected a string, got {type(value).__name__}",
            )

        if not self.pattern.fullmatch(value):
            raise RuleFailure(ViolationKind.FORMAT_MISMATCH, self._mismatch_message(value))

    def _mismatch_message(self, value: str) -> str:
        return f"value '{value}' does not match pattern '{self.pattern.pattern}'"

    @property
    def rule_type(self) -> str:
        return self._name


class EmailValidator(RegexValidator):
    """Validates that a string looks like an email address."""

    def __init__(self):
        super().__init__(EMAIL_PATTERN, name="email")

    def _mismatch_message(self, value: str) -> str:
        return f"value '{value}' is not a valid email address"
