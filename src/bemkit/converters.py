"""Conversions between the three BEM representations.

Each converter validates its input with ``validate_bem_structure`` and
raises ``BemError`` on failure. Input already in the requested
representation is returned as-is (same object, not a copy), so callers
must treat returned modifiers as borrowed.
"""

import logging
from typing import Any, List, Optional, Tuple

from .errors import BemError
from .models.bem_models import BemObject, BemString, BemStructure, BemVector
from .validators import (
    ELEMENT_DELIMITER,
    MODIFIER_DELIMITER,
    MODIFIER_VALUE_DELIMITER,
    is_bem_object,
    is_bem_string,
    is_bem_vector,
    validate_bem_structure,
)

logger = logging.getLogger(__name__)


def _check(bem_structure: Any) -> None:
    result = validate_bem_structure(bem_structure)
    if not result.is_valid:
        logger.debug(f"Rejected BEM structure: {result.error}")
        raise BemError.from_result(result)


def _split_bem_string(bem_string: str) -> Tuple[str, Optional[str], Optional[List[str]]]:
    blk_and_elt, _, mod_part = bem_string.partition(MODIFIER_DELIMITER)
    blk, _, elt = blk_and_elt.partition(ELEMENT_DELIMITER)
    mod = mod_part.split(MODIFIER_VALUE_DELIMITER) if mod_part else None
    return blk, elt or None, mod


def _decompose(bem_structure: Any) -> Tuple[Any, Any, Any]:
    """Split an already validated structure into ``(blk, elt, mod)``."""
    if is_bem_string(bem_structure):
        return _split_bem_string(bem_structure)

    if is_bem_vector(bem_structure):
        blk, elt, mod = (list(bem_structure) + [None, None, None])[:3]
        return blk, elt, mod

    return bem_structure.get("blk"), bem_structure.get("elt"), bem_structure.get("mod")


def _build_object(blk: Any, elt: Any, mod: Any) -> dict:
    bem_object = {"blk": blk}
    if elt is not None:
        bem_object["elt"] = elt
    if mod is not None:
        bem_object["mod"] = mod
    return bem_object


def to_bem_object(bem_structure: BemStructure) -> BemObject:
    """Convert any BEM structure to a BEM object.

    Example:
        >>> to_bem_object("foo__bar--fiz_buz")
        {'blk': 'foo', 'elt': 'bar', 'mod': ['fiz', 'buz']}

    Raises:
        BemError: If ``bem_structure`` is not a valid BEM structure
    """
    _check(bem_structure)

    if is_bem_object(bem_structure):
        return bem_structure

    return _build_object(*_decompose(bem_structure))


def to_bem_string(bem_structure: BemStructure) -> BemString:
    """Convert any BEM structure to its canonical BEM string.

    Example:
        >>> to_bem_string({"blk": "foo", "elt": "bar", "mod": ["fiz", "buz"]})
        'foo__bar--fiz_buz'

    Raises:
        BemError: If ``bem_structure`` is not a valid BEM structure
    """
    _check(bem_structure)

    if is_bem_string(bem_structure):
        return bem_structure

    blk, elt, mod = _decompose(bem_structure)

    bem_string = blk
    if elt is not None:
        bem_string += f"{ELEMENT_DELIMITER}{elt}"

    if mod is not None:
        bem_string += f"{MODIFIER_DELIMITER}{mod[0]}"
        if len(mod) > 1 and mod[1] is not None:
            bem_string += f"{MODIFIER_VALUE_DELIMITER}{mod[1]}"

    return bem_string


def to_bem_vector(bem_structure: BemStructure) -> BemVector:
    """Convert any BEM structure to a BEM vector ``[blk, elt, mod]``.

    Raises:
        BemError: If ``bem_structure`` is not a valid BEM structure
    """
    _check(bem_structure)

    if is_bem_vector(bem_structure):
        return bem_structure

    return list(_decompose(bem_structure))
