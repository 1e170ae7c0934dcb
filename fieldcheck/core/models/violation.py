"""
Violation model representing one failed rule against one field.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ViolationKind(str, Enum):
    """Category of a reported violation."""

    MISSING_REQUIRED_VALUE = "missing_required_value"
    OUT_OF_RANGE = "out_of_range"
    FORMAT_MISMATCH = "format_mismatch"
    UNKNOWN_RULE = "unknown_rule"
    MALFORMED_ARGUMENT = "malformed_argument"
    RULE_FAILED = "rule_failed"


class Violation(BaseModel):
    """
    A reported failure of one rule against one field.

    Attributes:
        field: Name (or dotted path) of the field that failed
        rule: Name of the rule that failed, as written in the declaration
        kind: Category of the failure
        message: Human-readable description
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "field": "Username",
                "rule": "min",
                "kind": "out_of_range",
                "message": "length 2 is less than minimum 3",
            }
        },
    )

    field: str
    rule: str
    kind: ViolationKind
    message: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"[{self.rule}] {self.field}: {self.message}"
