"""
Rule registry mapping rule names to rule implementations.

A registry is populated during initialization and then frozen; after the
freeze it is read-only, so concurrent validations can share it without locks.
"""

import threading
from collections.abc import Callable, Iterator
from typing import Any

from fieldcheck.core.validators import (
    BaseValidator,
    ChoiceValidator,
    EmailValidator,
    FunctionValidator,
    LengthValidator,
    MaxValidator,
    MinValidator,
    RequiredValidator,
)
from fieldcheck.observability.logger import get_logger

logger = get_logger(__name__)

RuleImplementation = BaseValidator | Callable[[Any, str | None], Any]


class RegistryFrozenError(RuntimeError):
    """Raised when registering a rule after the registry has been frozen."""


class RuleRegistry:
    """
    Holds the mapping from rule name to rule implementation.

    Registering a rule under an existing name replaces it (last write wins).
    """

    BUILTIN_VALIDATORS = {
        "required": RequiredValidator,
        "min": MinValidator,
        "max": MaxValidator,
        "len": LengthValidator,
        "email": EmailValidator,
        "oneof": ChoiceValidator,
    }

    def __init__(self, rules: dict[str, RuleImplementation] | None = None):
        self._rules: dict[str, BaseValidator] = {}
        self._frozen = False
        for name, implementation in (rules or {}).items():
            self.register(name, implementation)

    @classmethod
    def with_builtins(cls) -> "RuleRegistry":
        """Create an unfrozen registry holding the built-in rules."""
        registry = cls()
        for name, validator_class in cls.BUILTIN_VALIDATORS.items():
            registry.register(name, validator_class())
        return registry

    def register(self, name: str, implementation: RuleImplementation) -> None:
        """
        Register a rule implementation under a name.

        Args:
            name: Rule name as used in constraint declarations
            implementation: A BaseValidator, or a function taking (value, argument)

        Raises:
            RegistryFrozenError: If the registry has been frozen
            ValueError: If the name is empty or the implementation is not usable
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register rule '{name}': registry is frozen")

        name = name.strip() if isinstance(name, str) else name
        if not name or not isinstance(name, str):
            raise ValueError("Rule name must be a non-empty string")
        if "," in name or "=" in name:
            raise ValueError(f"Rule name '{name}' cannot contain ',' or '='")

        if isinstance(implementation, BaseValidator):
            validator = implementation
        elif callable(implementation):
            validator = FunctionValidator(name, implementation)
        else:
            raise ValueError(f"Rule '{name}' must be a BaseValidator or callable, got {type(implementation).__name__}")

        if name in self._rules:
            logger.debug(f"Replacing rule implementation: {name}", extra={"rule": name})
        self._rules[name] = validator

    def freeze(self) -> "RuleRegistry":
        """Close the registry for writes. Idempotent."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> BaseValidator | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return list(self._rules)

    def copy(self) -> "RuleRegistry":
        """Return an unfrozen copy, e.g. to extend a frozen registry."""
        duplicate = RuleRegistry()
        duplicate._rules = dict(self._rules)
        return duplicate

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={self.names()}, frozen={self._frozen})"


_default_registry: RuleRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> RuleRegistry:
    """
    Get the process-wide registry, creating it with the built-ins on first use.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = RuleRegistry.with_builtins()
    return _default_registry


def register_rule(name: str, implementation: RuleImplementation) -> None:
    """
    Register a rule on the process-wide registry.

    Must be called before the first validation through the default engine.

    Raises:
        RegistryFrozenError: If validation has already started
    """
    get_default_registry().register(name, implementation)
    logger.info(f"Registered rule: {name}", extra={"rule": name})
