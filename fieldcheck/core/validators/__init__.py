"""
Rule implementations.

Provides validators for required values, length/value bounds, regex and
email shapes, choice sets, and custom rule functions.
"""

from .base_validator import BaseValidator, InvalidRuleArgument, RuleFailure, parse_number
from .choice_validator import ChoiceValidator
from .custom_validator import FunctionValidator
from .range_validator import BoundValidator, LengthValidator, MaxValidator, MinValidator
from .regex_validator import EMAIL_PATTERN, EmailValidator, RegexValidator
from .required_validator import RequiredValidator, is_zero_value

__all__ = [
    "BaseValidator",
    "RuleFailure",
    "InvalidRuleArgument",
    "parse_number",
    "RequiredValidator",
    "is_zero_value",
    "BoundValidator",
    "MinValidator",
    "MaxValidator",
    "LengthValidator",
    "RegexValidator",
    "EmailValidator",
    "EMAIL_PATTERN",
    "ChoiceValidator",
    "FunctionValidator",
]
