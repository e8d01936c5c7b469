"""Models package for bemkit."""

from .bem_models import (
    BemName,
    BemValue,
    BemBlock,
    BemElement,
    BemModifierName,
    BemModifierValue,
    BemModifier,
    BemModifierRequirement,
    BemObject,
    BemString,
    BemVector,
    BemStructure,
    BemErrorKind,
    ValidationResult,
)

__all__ = [
    # Type aliases
    "BemName",
    "BemValue",
    "BemBlock",
    "BemElement",
    "BemModifierName",
    "BemModifierValue",
    "BemModifier",
    "BemModifierRequirement",
    "BemObject",
    "BemString",
    "BemVector",
    "BemStructure",
    # Results
    "BemErrorKind",
    "ValidationResult",
]
