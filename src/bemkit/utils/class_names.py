"""Reading BEM modifiers out of a DOM element's CSS class list.

These helpers are the pure half of page-object checks such as "element has
BEM modifier" or "element has no BEM modifier": the caller fetches the class
attribute, these functions decide.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Sequence, Union

from ..config import get_config
from ..converters import to_bem_object, to_bem_string
from ..errors import BemError
from ..grammar import type_and_value
from ..models.bem_models import BemModifier, BemModifierName, BemModifierRequirement
from ..validators import (
    validate_bem_modifier,
    validate_bem_modifier_name,
    validate_bem_modifier_requirement,
)

if TYPE_CHECKING:
    from ..base import BemBase

logger = logging.getLogger(__name__)


def split_class_names(class_names: Union[str, Sequence[str]]) -> List[str]:
    """Normalize a class attribute or a sequence of class names to a list.

    Empty and whitespace-only entries are dropped.

    Raises:
        TypeError: If ``class_names`` is neither a string nor a list/tuple
            of strings
    """
    if isinstance(class_names, str):
        return class_names.split()

    if not isinstance(class_names, (list, tuple)) or not all(
        isinstance(name, str) for name in class_names
    ):
        raise TypeError(
            "'class_names' must be a string or a sequence of strings but it "
            f"doesn't -- {type_and_value(class_names)}"
        )

    return [name.strip() for name in class_names if name.strip()]


def get_bem_modifiers(
    class_names: Union[str, Sequence[str]],
    bem_base: "BemBase",
    modifier_name: Optional[BemModifierName] = None,
) -> List[List[str]]:
    """Return modifiers of ``bem_base``'s block and element in a class list.

    The modifier of ``bem_base`` itself is ignored. Class names that are not
    valid BEM strings are skipped, unless ``strict_class_names`` is set.

    Example:
        >>> get_bem_modifiers("foo foo--cid_1 foo--bar", BemBase("foo"))
        [['cid', '1'], ['bar']]

    Raises:
        BemError: If ``modifier_name`` is given and is not a valid BEM name,
            or a class name is invalid in strict mode
    """
    if modifier_name is not None:
        result = validate_bem_modifier_name(modifier_name)
        if not result.is_valid:
            raise BemError.from_result(result)

    strict = get_config().strict_class_names
    modifiers = []

    for class_name in split_class_names(class_names):
        try:
            bem_object = to_bem_object(class_name)
        except BemError:
            if strict:
                raise
            logger.debug(f"Skipping non-BEM class name: {class_name}")
            continue

        if bem_object["blk"] != bem_base.blk or bem_object.get("elt") != bem_base.elt:
            continue

        mod = bem_object.get("mod")
        if mod is None:
            continue

        if modifier_name is not None and mod[0] != modifier_name:
            continue

        modifiers.append(mod)

    return modifiers


def has_bem_modifier(
    class_names: Union[str, Sequence[str]],
    bem_base: "BemBase",
    bem_modifier: BemModifier,
) -> bool:
    """Whether the class ``bem_base`` + ``bem_modifier`` is in the class list.

    Raises:
        BemError: If ``bem_modifier`` is not a valid BEM modifier
    """
    result = validate_bem_modifier(bem_modifier)
    if not result.is_valid:
        raise BemError.from_result(result)

    expected = to_bem_string(
        {"blk": bem_base.blk, "elt": bem_base.elt, "mod": result.value}
    )
    return expected in split_class_names(class_names)


def unmet_modifier_requirements(
    class_names: Union[str, Sequence[str]],
    bem_base: "BemBase",
    requirements: Iterable[Union[BemModifierName, BemModifierRequirement]],
) -> List[List[Any]]:
    """Return the modifier requirements the class list does not satisfy.

    A requirement is either a bare modifier name or a
    ``[name, value?, negate?]`` requirement. A negated requirement is met
    when the modifier is absent. An empty result means every requirement is
    met.

    Raises:
        BemError: If a requirement is not a valid BEM modifier requirement
    """
    classes = split_class_names(class_names)
    unmet = []

    for requirement in requirements:
        if isinstance(requirement, str):
            requirement = [requirement]

        result = validate_bem_modifier_requirement(requirement)
        if not result.is_valid:
            raise BemError.from_result(result)

        mod_name, mod_value, negate = result.value
        present = has_bem_modifier(classes, bem_base, [mod_name, mod_value])
        if present == negate:
            unmet.append(result.value)

    return unmet
