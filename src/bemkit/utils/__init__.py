"""Utility functions and helpers."""

from .class_names import (
    split_class_names,
    get_bem_modifiers,
    has_bem_modifier,
    unmet_modifier_requirements,
)

__all__ = [
    # Class name helpers
    "split_class_names",
    "get_bem_modifiers",
    "has_bem_modifier",
    "unmet_modifier_requirements",
]
