"""Grammar of the two atomic BEM lexical categories.

Every BEM part is built from one of them:

- Name: block, element and modifier name. Starts with a letter, ends with a
  letter or a digit, may contain single dashes in between.
- Value: modifier value. Same as Name but may also start with a digit.

Neither may contain two adjacent dashes.
"""

import re
from typing import Any

from .models.bem_models import BemErrorKind, ValidationResult, failure, success

BEM_NAME_PATTERN = re.compile(r"[a-zA-Z](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?")
BEM_VALUE_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?")

DOUBLE_DASH = "--"


def type_and_value(value: Any) -> str:
    """Describe ``value`` for error messages, e.g. ``str foo--bar``."""
    return f"{type(value).__name__} {value}"


def _validate(label: str, pattern: "re.Pattern[str]", value: Any) -> ValidationResult:
    if not isinstance(value, str):
        return failure(
            value,
            f"{label}: must be a string but it doesn't -- {type_and_value(value)}",
            BemErrorKind.NOT_A_STRING,
        )

    if pattern.fullmatch(value) is None or DOUBLE_DASH in value:
        return failure(
            value,
            f"{label}: must conform constraints but it doesn't -- "
            f"{type_and_value(value)}",
            BemErrorKind.CONSTRAINT_VIOLATION,
        )

    return success(value)


def validate_bem_name(bem_name: Any) -> ValidationResult:
    """Validate a BEM name (block, element or modifier name).

    Example:
        >>> validate_bem_name("name-with-dashes").to_dict()
        {'value': 'name-with-dashes'}
    """
    return _validate("BEM name", BEM_NAME_PATTERN, bem_name)


def validate_bem_value(bem_value: Any) -> ValidationResult:
    """Validate a BEM value (modifier value)."""
    return _validate("BEM value", BEM_VALUE_PATTERN, bem_value)


def is_bem_name(value: Any) -> bool:
    return validate_bem_name(value).is_valid


def is_bem_value(value: Any) -> bool:
    return validate_bem_value(value).is_valid
