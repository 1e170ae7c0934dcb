"""
Constraint configuration management.

Loads constraint declarations from YAML files and provides a builder for
assembling them programmatically.
"""

from pathlib import Path
from typing import Any

import yaml

from fieldcheck.core.models import RuleSpec
from fieldcheck.observability.logger import get_logger, log_operation

from .constraint_parser import format_constraints

logger = get_logger(__name__)


class ConstraintConfigLoader:
    """
    Loads constraint declarations from YAML configuration files.

    Expected YAML format:
    ```yaml
    schemas:
      signup:
        Username: "required,min=3,max=20"
        Email: "required,email"

      profile:
        Age:
          - required
          - min: 13
        Address.City: "max=80"
        Nickname:            # unconstrained
    ```

    A field's declaration may be a string, a list of tokens (strings or
    single-key mappings) or null.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the constraint config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Constraint configuration file not found: {config_path}")

    def load_schemas(self) -> dict[str, dict[str, str]]:
        """
        Load every schema from the YAML file.

        Returns:
            Mapping of schema name to {field name: declaration string}

        Raises:
            ValueError: If YAML is invalid or a schema is malformed
        """
        with log_operation("Loading constraint schemas", logger=logger, path=str(self.config_path)):
            with open(self.config_path) as f:
                try:
                    config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

            if not isinstance(config, dict) or "schemas" not in config:
                raise ValueError("Configuration file must contain 'schemas' section")

            schemas = config["schemas"]
            if not isinstance(schemas, dict):
                raise ValueError("'schemas' must be a mapping of schema name to fields")

            return {
                str(schema_name): self._parse_schema(str(schema_name), fields)
                for schema_name, fields in schemas.items()
            }

    def load_schema(self, schema_name: str) -> dict[str, str]:
        """
        Load a single named schema.

        Raises:
            KeyError: If the schema is not defined in the file
        """
        schemas = self.load_schemas()
        if schema_name not in schemas:
            raise KeyError(f"Schema '{schema_name}' not found in {self.config_path}")
        return schemas[schema_name]

    def _parse_schema(self, schema_name: str, fields: Any) -> dict[str, str]:
        if fields is None:
            return {}
        if not isinstance(fields, dict):
            raise ValueError(f"Schema '{schema_name}' must be a mapping of field name to declaration")

        return {
            str(field_name): self._parse_declaration(schema_name, str(field_name), declaration)
            for field_name, declaration in fields.items()
        }

    def _parse_declaration(self, schema_name: str, field_name: str, declaration: Any) -> str:
        """
        Normalize one field's declaration to a declaration string.

        Raises:
            ValueError: If the declaration has an unsupported shape
        """
        if declaration is None:
            return ""
        if isinstance(declaration, str):
            return declaration
        if not isinstance(declaration, list):
            raise ValueError(
                f"Declaration for '{schema_name}.{field_name}' must be a string or a list"
            )

        specs = []
        for token in declaration:
            if isinstance(token, str):
                specs.append(RuleSpec(token.strip()))
            elif isinstance(token, dict) and len(token) == 1:
                name, argument = next(iter(token.items()))
                specs.append(RuleSpec(str(name), None if argument is None else _format_argument(argument)))
            else:
                raise ValueError(
                    f"Invalid rule token {token!r} for '{schema_name}.{field_name}'"
                )
        return format_constraints(specs)


def _format_argument(argument: Any) -> str:
    if isinstance(argument, list):
        return " ".join(str(item) for item in argument)
    return str(argument)


class ConstraintBuilder:
    """
    Programmatically build constraint declarations (for testing or dynamic forms).

    Usage:
        constraints = ConstraintBuilder() \\
            .add_required("Username") \\
            .add_min("Username", 3) \\
            .add_max("Username", 20) \\
            .build()
    """

    def __init__(self):
        """Initialize empty constraint configuration."""
        self.fields: dict[str, list[RuleSpec]] = {}

    def add_rule(self, field_name: str, rule_name: str, argument: Any = None) -> "ConstraintBuilder":
        """Add any registered rule, with an optional argument."""
        specs = self.fields.setdefault(field_name, [])
        specs.append(RuleSpec(rule_name, None if argument is None else str(argument)))
        return self

    def add_field(self, field_name: str) -> "ConstraintBuilder":
        """Declare an unconstrained field."""
        self.fields.setdefault(field_name, [])
        return self

    def add_required(self, field_name: str) -> "ConstraintBuilder":
        return self.add_rule(field_name, "required")

    def add_min(self, field_name: str, bound: int | float) -> "ConstraintBuilder":
        return self.add_rule(field_name, "min", bound)

    def add_max(self, field_name: str, bound: int | float) -> "ConstraintBuilder":
        return self.add_rule(field_name, "max", bound)

    def add_len(self, field_name: str, length: int) -> "ConstraintBuilder":
        return self.add_rule(field_name, "len", length)

    def add_email(self, field_name: str) -> "ConstraintBuilder":
        return self.add_rule(field_name, "email")

    def add_oneof(self, field_name: str, *choices: Any) -> "ConstraintBuilder":
        return self.add_rule(field_name, "oneof", " ".join(str(c) for c in choices))

    def build(self) -> dict[str, str]:
        """Build and return the mapping of field name to declaration string."""
        return {name: format_constraints(specs) for name, specs in self.fields.items()}
