"""BEM data models.

This module defines the type aliases for the BEM parts and structures, the
error taxonomy shared by validators and raising helpers, and the Pydantic
model every validator returns.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Mapping, Optional, Sequence, Union
from enum import Enum


BemName = str
BemValue = str

BemBlock = BemName
BemElement = BemName
BemModifierName = BemName
BemModifierValue = BemValue

# [name] or [name, value]
BemModifier = Sequence[Optional[str]]

# [name], [name, value] or [name, value, negate]
BemModifierRequirement = Sequence[Any]

# {"blk": ..., "elt": ..., "mod": ...}
BemObject = Mapping[str, Any]
BemString = str
# [blk], [blk, elt] or [blk, elt, mod]
BemVector = Sequence[Any]

BemStructure = Union[BemObject, BemString, BemVector]


class BemErrorKind(str, Enum):
    """Structural rule a failed validation violated."""

    NOT_A_STRING = "not_a_string"
    NOT_AN_ARRAY = "not_an_array"
    NOT_A_PLAIN_OBJECT = "not_a_plain_object"
    CONSTRAINT_VIOLATION = "constraint_violation"
    TOO_MANY_PARTS = "too_many_parts"
    UNRECOGNIZED_STRUCTURE = "unrecognized_structure"
    FROZEN_INSTANCE_MUTATION = "frozen_instance_mutation"


class ValidationResult(BaseModel):
    """Outcome of a validator.

    The validated value is always echoed back, even on failure, so callers
    can report what was rejected. ``error`` and ``kind`` are set if and only
    if validation failed.
    """

    value: Any = Field(description="Validated (or rejected) value")
    error: Optional[str] = Field(default=None, description="Failure message")
    kind: Optional[BemErrorKind] = Field(
        default=None, description="Violated structural rule"
    )

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Plain form: ``{"value": v}`` or ``{"value": v, "error": msg}``."""
        if self.error is None:
            return {"value": self.value}
        return {"value": self.value, "error": self.error}

    def relabel(self, label: str) -> "ValidationResult":
        """Return a copy whose error is prefixed with ``label``."""
        if self.error is None:
            return self
        return ValidationResult(
            value=self.value, error=f"{label}: {self.error}", kind=self.kind
        )


def failure(
    value: Any, error: str, kind: BemErrorKind
) -> ValidationResult:
    """Build a failed validation result."""
    return ValidationResult(value=value, error=error, kind=kind)


def success(value: Any) -> ValidationResult:
    """Build a successful validation result."""
    return ValidationResult(value=value)
