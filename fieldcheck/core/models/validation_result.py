"""
ValidationResult model representing the outcome of validating a record (ephemeral).
"""

from pydantic import BaseModel, ConfigDict, Field

from .violation import Violation


class ViolationsFound(Exception):
    """Raised by ValidationResult.raise_for_violations() when a record is invalid."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        summary = "; ".join(str(v) for v in result.violations)
        super().__init__(f"{len(result.violations)} violation(s): {summary}")


class ValidationResult(BaseModel):
    """
    Outcome of validating a record: Valid, or Invalid with its violations.

    Holds at most one violation per field, in field order.

    Attributes:
        violations: First violation of every failing field
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "violations": [
                    {
                        "field": "Username",
                        "rule": "min",
                        "kind": "out_of_range",
                        "message": "length 2 is less than minimum 3",
                    }
                ]
            }
        },
    )

    violations: tuple[Violation, ...] = Field(default_factory=tuple)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls()

    @property
    def passed(self) -> bool:
        """True when no violations were found."""
        return not self.violations

    @property
    def failed_fields(self) -> list[str]:
        return [v.field for v in self.violations]

    def errors_by_field(self) -> dict[str, str]:
        """Map each failing field to its violation message (for form UIs)."""
        return {v.field: v.message for v in self.violations}

    def raise_for_violations(self) -> None:
        """
        Raise ViolationsFound if the result is invalid.

        Raises:
            ViolationsFound: If any violation was recorded
        """
        if self.violations:
            raise ViolationsFound(self)

    def __bool__(self) -> bool:
        return self.passed
