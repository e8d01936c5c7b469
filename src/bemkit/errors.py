"""Exceptions raised by bemkit converters and BEM bases."""

from typing import Optional

from .models.bem_models import BemErrorKind, ValidationResult


class BemError(ValueError):
    """Raised when a BEM structure or part fails validation."""

    def __init__(self, message: str, kind: Optional[BemErrorKind] = None):
        super().__init__(message)
        self.kind = kind

    @classmethod
    def from_result(cls, result: ValidationResult) -> "BemError":
        return cls(result.error or "BEM validation failed", result.kind)


class BemFrozenError(BemError):
    """Raised when a frozen BEM base is mutated through a validating setter."""

    def __init__(self, message: str):
        super().__init__(message, BemErrorKind.FROZEN_INSTANCE_MUTATION)
