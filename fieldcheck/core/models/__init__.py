"""
Core data models for the field validation engine.

All models use Pydantic and are frozen once constructed.
"""

from .rule_spec import RuleSpec
from .validation_result import ValidationResult, ViolationsFound
from .violation import Violation, ViolationKind

__all__ = [
    "RuleSpec",
    "Violation",
    "ViolationKind",
    "ValidationResult",
    "ViolationsFound",
]
