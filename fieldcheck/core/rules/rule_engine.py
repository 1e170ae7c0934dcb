"""
Rule engine for validating records against per-field constraint declarations.

The rule engine parses each field's declaration, dispatches every rule to the
registry and reports violations as data. It performs no I/O and never logs.
"""

import threading
from collections.abc import Iterable, Mapping
from typing import Any

from fieldcheck.core.models import ValidationResult, Violation, ViolationKind
from fieldcheck.core.records import PATH_SEPARATOR, field_names, resolve_field
from fieldcheck.core.validators import InvalidRuleArgument, RuleFailure

from .constraint_parser import parse_constraints
from .registry import RuleRegistry, get_default_registry

Constraints = Mapping[str, str | None]

UNKNOWN_RULE_MESSAGE = "unknown rule"
INVALID_ARGUMENT_MESSAGE = "invalid rule argument"


class RuleEngine:
    """
    Validates records against constraint declarations.

    Within one field, rules run in declaration order and stop at the first
    failure. Across fields, validate_fail_fast stops at the first failing
    field while validate_all collects the first violation of every field.
    """

    def __init__(self, registry: RuleRegistry | None = None):
        """
        Initialize the rule engine.

        Args:
            registry: Rule implementations to dispatch to (default: the
                      process-wide registry). The registry is frozen here.
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.registry.freeze()

    def validate_fail_fast(self, record: Any, constraints: Constraints) -> Violation | None:
        """
        Validate a record, stopping at the first field with a violation.

        Args:
            record: The record to validate (mapping, pydantic model, dataclass or object)
            constraints: Mapping of field name (or dotted path) to declaration string

        Returns:
            The first Violation found, or None if the record is valid
        """
        for field in self._ordered_fields(record, constraints):
            violation = self._validate_field(record, field, constraints[field])
            if violation is not None:
                return violation
        return None

    def validate_all(self, record: Any, constraints: Constraints) -> ValidationResult:
        """
        Validate a record, collecting the first violation of every field.

        Args:
            record: The record to validate
            constraints: Mapping of field name (or dotted path) to declaration string

        Returns:
            ValidationResult with violations in field order
        """
        violations = []
        for field in self._ordered_fields(record, constraints):
            violation = self._validate_field(record, field, constraints[field])
            if violation is not None:
                violations.append(violation)
        return ValidationResult(violations=tuple(violations))

    def validate_batch(self, records: Iterable[Any], constraints: Constraints) -> list[ValidationResult]:
        """
        Validate a batch of records with the same constraints.

        Returns:
            List of ValidationResult objects, one per record
        """
        return [self.validate_all(record, constraints) for record in records]

    def _ordered_fields(self, record: Any, constraints: Constraints) -> list[str]:
        """
        Order constrained fields by the record's own field order.

        Paths whose top-level field is not in the record go last, keeping
        the order of the constraints mapping among ties.
        """
        if not constraints:
            return []

        names = field_names(record)
        position = {name: index for index, name in enumerate(names)}

        keyed = []
        for index, path in enumerate(constraints):
            head = path if path in position else path.split(PATH_SEPARATOR, 1)[0]
            keyed.append((position.get(head, len(names)), index, path))

        return [path for _, _, path in sorted(keyed)]

    def _validate_field(self, record: Any, field: str, declaration: str | None) -> Violation | None:
        specs = parse_constraints(declaration)
        if not specs:
            return None

        value = resolve_field(record, field)

        for spec in specs:
            validator = self.registry.get(spec.name)
            if validator is None:
                return Violation(
                    field=field,
                    rule=spec.name,
                    kind=ViolationKind.UNKNOWN_RULE,
                    message=UNKNOWN_RULE_MESSAGE,
                )

            try:
                validator.validate(value, spec.argument)
            except InvalidRuleArgument:
                return Violation(
                    field=field,
                    rule=spec.name,
                    kind=ViolationKind.MALFORMED_ARGUMENT,
                    message=INVALID_ARGUMENT_MESSAGE,
                )
            except RuleFailure as e:
                return Violation(
                    field=field,
                    rule=spec.name,
                    kind=e.kind,
                    message=e.message or f"failed rule '{spec.name}'",
                )

        return None

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of available rules.

        Returns:
            Dictionary with rule count and the implementation type of each rule
        """
        return {
            "total_rules": len(self.registry),
            "rules": {name: self.registry.get(name).rule_type for name in self.registry},
        }


_default_engine: RuleEngine | None = None
_default_engine_lock = threading.Lock()


def get_default_engine() -> RuleEngine:
    """
    Get the engine over the process-wide registry.

    Creating it freezes the process-wide registry.
    """
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = RuleEngine(get_default_registry())
    return _default_engine


def validate_fail_fast(record: Any, constraints: Constraints) -> Violation | None:
    """Fail-fast validation through the default engine."""
    return get_default_engine().validate_fail_fast(record, constraints)


def validate_all(record: Any, constraints: Constraints) -> ValidationResult:
    """Aggregating validation through the default engine."""
    return get_default_engine().validate_all(record, constraints)
