"""
Rule registry, constraint parsing, validation engine and configuration management.
"""

from .constraint_parser import format_constraints, parse_constraints
from .registry import RegistryFrozenError, RuleRegistry, get_default_registry, register_rule
from .rule_config import ConstraintBuilder, ConstraintConfigLoader
from .rule_engine import RuleEngine, get_default_engine, validate_all, validate_fail_fast

__all__ = [
    "RuleEngine",
    "RuleRegistry",
    "RegistryFrozenError",
    "get_default_registry",
    "get_default_engine",
    "register_rule",
    "parse_constraints",
    "format_constraints",
    "validate_fail_fast",
    "validate_all",
    "ConstraintConfigLoader",
    "ConstraintBuilder",
]
