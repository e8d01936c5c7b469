"""Structural BEM validators.

Each validator layers a semantic label onto the name/value grammar and
short-circuits on the first failure it meets. Validators never raise: they
return a ``ValidationResult`` that always echoes the validated value and
carries ``error``/``kind`` only when validation failed.

PATTERN: block is checked first, then element, then modifier, so error
messages are deterministic for a given input.
"""

from collections.abc import Mapping
from typing import Any, Optional

from .grammar import type_and_value, validate_bem_name, validate_bem_value
from .models.bem_models import BemErrorKind, ValidationResult, failure, success

ELEMENT_DELIMITER = "__"
MODIFIER_DELIMITER = "--"
MODIFIER_VALUE_DELIMITER = "_"


def is_bem_string(value: Any) -> bool:
    return isinstance(value, str)


def is_bem_vector(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_bem_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def validate_bem_block(bem_block: Any) -> ValidationResult:
    return validate_bem_name(bem_block).relabel("BEM block")


def validate_bem_element(bem_element: Any) -> ValidationResult:
    return validate_bem_name(bem_element).relabel("BEM element")


def validate_bem_modifier_name(bem_modifier_name: Any) -> ValidationResult:
    return validate_bem_name(bem_modifier_name).relabel("BEM modifier's name")


def validate_bem_modifier_value(bem_modifier_value: Any) -> ValidationResult:
    return validate_bem_value(bem_modifier_value).relabel("BEM modifier's value")


def validate_bem_modifier(bem_modifier: Any) -> ValidationResult:
    """Validate a BEM modifier, ``[name]`` or ``[name, value]``.

    A ``None`` value is the same as an absent one, so ``["foo", None]`` is a
    simple modifier. On success the value is the normalized list.

    Example:
        >>> validate_bem_modifier(("foo", "1")).value
        ['foo', '1']
    """
    if not is_bem_vector(bem_modifier):
        return failure(
            bem_modifier,
            "BEM modifier: must be an array but it doesn't -- "
            f"{type_and_value(bem_modifier)}",
            BemErrorKind.NOT_AN_ARRAY,
        )

    if len(bem_modifier) > 2:
        return failure(
            bem_modifier,
            "BEM modifier: can have only one BEM modifier value but it "
            f"doesn't -- {bem_modifier[0]} "
            + ", ".join(str(v) for v in bem_modifier[1:]),
            BemErrorKind.TOO_MANY_PARTS,
        )

    mod_name = bem_modifier[0] if len(bem_modifier) > 0 else None
    mod_value = bem_modifier[1] if len(bem_modifier) > 1 else None

    result = validate_bem_modifier_name(mod_name)
    if not result.is_valid:
        return failure(bem_modifier, f"BEM modifier: {result.error}", result.kind)

    if mod_value is None:
        return success([mod_name])

    result = validate_bem_modifier_value(mod_value)
    if not result.is_valid:
        return failure(
            bem_modifier, f"BEM modifier: optional {result.error}", result.kind
        )

    return success([mod_name, mod_value])


def validate_bem_modifier_requirement(requirement: Any) -> ValidationResult:
    """Validate a BEM modifier requirement, ``[name, value?, negate?]``.

    ``negate`` defaults to ``False``. On success the value is the normalized
    list ``[name, value, negate]`` where ``value`` may be ``None``.
    """
    label = "BEM modifier requirement"

    if not is_bem_vector(requirement):
        return failure(
            requirement,
            f"{label}: must be an array of one, two or three elements but it "
            f"doesn't -- {type_and_value(requirement)}",
            BemErrorKind.NOT_AN_ARRAY,
        )

    if len(requirement) > 3:
        return failure(
            requirement,
            f"{label}: must be an array of one, two or three elements but it "
            f"doesn't -- {type_and_value(requirement)}",
            BemErrorKind.TOO_MANY_PARTS,
        )

    mod_name = requirement[0] if len(requirement) > 0 else None
    mod_value = requirement[1] if len(requirement) > 1 else None
    negate = requirement[2] if len(requirement) > 2 else None
    if negate is None:
        negate = False

    result = validate_bem_modifier([mod_name, mod_value])
    if not result.is_valid:
        return failure(requirement, f"{label}: {result.error}", result.kind)

    if not isinstance(negate, bool):
        return failure(
            requirement,
            f"{label}: negation flag must be a boolean but it doesn't -- "
            f"{type_and_value(negate)}",
            BemErrorKind.CONSTRAINT_VIOLATION,
        )

    return success([mod_name, mod_value, negate])


def _validate_bem_parts(blk: Any, elt: Any, mod: Any) -> Optional[ValidationResult]:
    """Return the first failing part result, or ``None`` when all parts pass."""
    result = validate_bem_block(blk)
    if not result.is_valid:
        return result

    if elt is not None:
        result = validate_bem_element(elt)
        if not result.is_valid:
            return result

    if mod is not None:
        result = validate_bem_modifier(mod)
        if not result.is_valid:
            return result

    return None


def validate_bem_object(bem_object: Any) -> ValidationResult:
    """Validate a BEM object, ``{"blk": ..., "elt": ..., "mod": ...}``.

    Keys other than ``blk``, ``elt`` and ``mod`` are ignored; ``elt`` and
    ``mod`` set to ``None`` count as absent.
    """
    if not is_bem_object(bem_object):
        return failure(
            bem_object,
            "BEM object: must be a plain object but it doesn't -- "
            f"{type_and_value(bem_object)}",
            BemErrorKind.NOT_A_PLAIN_OBJECT,
        )

    error = _validate_bem_parts(
        bem_object.get("blk"), bem_object.get("elt"), bem_object.get("mod")
    )
    if error is not None:
        return failure(bem_object, f"BEM object: {error.error}", error.kind)

    return success(bem_object)


def validate_bem_vector(bem_vector: Any) -> ValidationResult:
    """Validate a BEM vector, ``[blk, elt?, mod?]``."""
    if not is_bem_vector(bem_vector):
        return failure(
            bem_vector,
            "BEM vector: must be an array of one, two or three elements but "
            f"it doesn't -- {type_and_value(bem_vector)}",
            BemErrorKind.NOT_AN_ARRAY,
        )

    if len(bem_vector) > 3:
        return failure(
            bem_vector,
            "BEM vector: must be an array of one, two or three elements but "
            f"it doesn't -- {type_and_value(bem_vector)}",
            BemErrorKind.TOO_MANY_PARTS,
        )

    blk, elt, mod = (list(bem_vector) + [None, None, None])[:3]
    error = _validate_bem_parts(blk, elt, mod)
    if error is not None:
        return failure(bem_vector, f"BEM vector: {error.error}", error.kind)

    return success(bem_vector)


def validate_bem_string(bem_string: Any) -> ValidationResult:
    """Validate a BEM string such as ``foo__bar--fiz_buz``.

    The string is read right to left: the modifier part is split off first,
    then the element part, and what remains is the block.

    Example:
        >>> validate_bem_string("blk--mod1--mod2_2").error
        'BEM string: can have only one BEM modifier but 2 of them found -- mod1, mod2_2'
    """

    def fail(error: str, kind: Optional[BemErrorKind]) -> ValidationResult:
        return failure(bem_string, f"BEM string: {error}", kind)

    if not is_bem_string(bem_string):
        return fail(
            f"must be a string but it doesn't -- {type_and_value(bem_string)}",
            BemErrorKind.NOT_A_STRING,
        )

    # 1. Modifier part
    parts = bem_string.split(MODIFIER_DELIMITER)
    mod_parts = parts[1:]

    if len(mod_parts) > 1:
        return fail(
            f"can have only one BEM modifier but {len(mod_parts)} of them "
            f"found -- {', '.join(mod_parts)}",
            BemErrorKind.TOO_MANY_PARTS,
        )

    if mod_parts:
        tokens = mod_parts[0].split(MODIFIER_VALUE_DELIMITER)
        if len(tokens) > 2:
            return fail(
                f"modifier can have only one value but {len(tokens) - 1} of "
                f"them found -- {', '.join(tokens[1:])}",
                BemErrorKind.TOO_MANY_PARTS,
            )

        result = validate_bem_modifier(tokens)
        if not result.is_valid:
            return fail(result.error, result.kind)

    # 2. Element part
    parts = parts[0].split(ELEMENT_DELIMITER)
    elt_parts = parts[1:]

    if len(elt_parts) > 1:
        return fail(
            f"can have only one BEM element but {len(elt_parts)} of them "
            f"found -- {', '.join(elt_parts)}",
            BemErrorKind.TOO_MANY_PARTS,
        )

    if elt_parts:
        result = validate_bem_element(elt_parts[0])
        if not result.is_valid:
            return fail(result.error, result.kind)

    # 3. Block part
    result = validate_bem_block(parts[0])
    if not result.is_valid:
        return fail(result.error, result.kind)

    return success(bem_string)


def validate_bem_structure(bem_structure: Any) -> ValidationResult:
    """Validate any BEM structure, dispatching on its runtime shape."""
    if is_bem_string(bem_structure):
        result = validate_bem_string(bem_structure)
    elif is_bem_vector(bem_structure):
        result = validate_bem_vector(bem_structure)
    elif is_bem_object(bem_structure):
        result = validate_bem_object(bem_structure)
    else:
        result = failure(
            bem_structure,
            "must be a BEM object|string|vector but it doesn't -- "
            f"{type_and_value(bem_structure)}",
            BemErrorKind.UNRECOGNIZED_STRUCTURE,
        )

    return result.relabel("BEM structure")
