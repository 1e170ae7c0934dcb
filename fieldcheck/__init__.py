"""
fieldcheck - declarative per-field validation of in-memory records.

Usage:
    from fieldcheck import validate_all

    result = validate_all(
        {"Username": "jo", "Email": "jane@example.com"},
        {"Username": "required,min=3,max=20", "Email": "required,email"},
    )
    result.passed          # False
    result.failed_fields   # ["Username"]
"""

from fieldcheck.core.models import RuleSpec, ValidationResult, Violation, ViolationKind, ViolationsFound
from fieldcheck.core.rules import (
    ConstraintBuilder,
    ConstraintConfigLoader,
    RegistryFrozenError,
    RuleEngine,
    RuleRegistry,
    format_constraints,
    get_default_engine,
    get_default_registry,
    parse_constraints,
    register_rule,
    validate_all,
    validate_fail_fast,
)
from fieldcheck.core.validators import BaseValidator, InvalidRuleArgument, RuleFailure

__version__ = "0.1.0"

__all__ = [
    "validate_fail_fast",
    "validate_all",
    "register_rule",
    "RuleEngine",
    "RuleRegistry",
    "RegistryFrozenError",
    "get_default_engine",
    "get_default_registry",
    "parse_constraints",
    "format_constraints",
    "ConstraintBuilder",
    "ConstraintConfigLoader",
    "BaseValidator",
    "RuleFailure",
    "InvalidRuleArgument",
    "RuleSpec",
    "Violation",
    "ViolationKind",
    "ValidationResult",
    "ViolationsFound",
]
