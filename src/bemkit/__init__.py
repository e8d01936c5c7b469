"""BEM (Block-Element-Modifier) names for CSS classes.

This package provides:
- Grammar of BEM names and values
- Validators for BEM parts and the three BEM representations
  (string, object, vector) that return results instead of raising
- Converters between the representations
- BemBase, a mutable and freezable value object over one BEM triple
- Helpers reading BEM modifiers out of CSS class lists
"""

from .grammar import validate_bem_name, validate_bem_value, is_bem_name, is_bem_value
from .validators import (
    is_bem_object,
    is_bem_string,
    is_bem_vector,
    validate_bem_block,
    validate_bem_element,
    validate_bem_modifier_name,
    validate_bem_modifier_value,
    validate_bem_modifier,
    validate_bem_modifier_requirement,
    validate_bem_object,
    validate_bem_vector,
    validate_bem_string,
    validate_bem_structure,
)
from .converters import to_bem_object, to_bem_string, to_bem_vector
from .base import BemBase
from .errors import BemError, BemFrozenError
from .models import BemErrorKind, ValidationResult

__version__ = "0.1.0"

__all__ = [
    # Grammar
    "validate_bem_name",
    "validate_bem_value",
    "is_bem_name",
    "is_bem_value",
    # Validators
    "is_bem_object",
    "is_bem_string",
    "is_bem_vector",
    "validate_bem_block",
    "validate_bem_element",
    "validate_bem_modifier_name",
    "validate_bem_modifier_value",
    "validate_bem_modifier",
    "validate_bem_modifier_requirement",
    "validate_bem_object",
    "validate_bem_vector",
    "validate_bem_string",
    "validate_bem_structure",
    # Converters
    "to_bem_object",
    "to_bem_string",
    "to_bem_vector",
    # Entity
    "BemBase",
    # Errors and results
    "BemError",
    "BemFrozenError",
    "BemErrorKind",
    "ValidationResult",
]
