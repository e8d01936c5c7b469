"""BEM base: a mutable value object wrapping one block/element/modifier triple.

A BEM base starts mutable and can be frozen permanently with ``freeze()``.
There are two ways to change it:

- the ``blk``/``elt``/``mod`` property setters re-validate the whole
  resulting triple before committing and refuse to touch a frozen instance;
- ``set_blk``/``set_elt``/``set_mod`` are the trusted path for callers that
  already validated their input: no validation, no frozen check, chainable.

CRITICAL: Frozen instances are read-only through the validating setters and
may be shared between threads; ``clone()`` is the only way back to a mutable
copy.
"""

import logging
from typing import Any, List, Optional, Sequence, Union

from .config import get_config
from .converters import to_bem_object, to_bem_string, to_bem_vector
from .errors import BemError, BemFrozenError
from .models.bem_models import (
    BemBlock,
    BemElement,
    BemModifier,
    BemModifierName,
    BemObject,
    BemString,
    BemStructure,
    BemVector,
)
from .utils.class_names import get_bem_modifiers, has_bem_modifier
from .validators import validate_bem_modifier, validate_bem_object

logger = logging.getLogger(__name__)


def _own_modifier(bem_modifier: Any) -> Optional[List[Optional[str]]]:
    """Normalized private copy of a validated modifier."""
    if bem_modifier is None:
        return None
    return validate_bem_modifier(bem_modifier).value


class BemBase:
    """Validated BEM block/element/modifier triple.

    Example:
        >>> bem_base = BemBase("foo__bar--uno_1")
        >>> bem_base.mod
        ['uno', '1']
        >>> bem_base.to_query_selector()
        '.foo__bar--uno_1'
    """

    def __init__(self, initializer: BemStructure, frozen: Optional[bool] = None):
        """Initialize from any BEM structure.

        Args:
            initializer: BEM string, object or vector
            frozen: Freeze the instance right away; defaults to the
                ``default_frozen`` setting

        Raises:
            BemError: If ``initializer`` is not a valid BEM structure
        """
        bem_object = to_bem_object(initializer)

        self._blk: BemBlock = bem_object["blk"]
        self._elt: Optional[BemElement] = bem_object.get("elt")
        self._mod = _own_modifier(bem_object.get("mod"))

        self._frozen = get_config().default_frozen if frozen is None else frozen

    def _throw_if_frozen(self, message: str) -> None:
        if self._frozen:
            raise BemFrozenError(
                f"Instance is frozen and can not be changed -- {message}"
            )

    def _validated(self, **parts: Any) -> BemObject:
        candidate = {"blk": self._blk, "elt": self._elt, "mod": self._mod}
        candidate.update(parts)

        result = validate_bem_object(candidate)
        if not result.is_valid:
            logger.debug(f"Rejected BEM base change {parts}: {result.error}")
            raise BemError.from_result(result)

        return candidate

    def _as_object(self) -> BemObject:
        bem_object = {"blk": self._blk}
        if self._elt is not None:
            bem_object["elt"] = self._elt
        if self._mod is not None:
            bem_object["mod"] = list(self._mod)
        return bem_object

    @property
    def blk(self) -> BemBlock:
        return self._blk

    @blk.setter
    def blk(self, bem_block: BemBlock) -> None:
        self._throw_if_frozen("failed to set block part")
        self._blk = self._validated(blk=bem_block)["blk"]

    def set_blk(self, bem_block: BemBlock) -> "BemBase":
        self._blk = bem_block
        return self

    @property
    def elt(self) -> Optional[BemElement]:
        return self._elt

    @elt.setter
    def elt(self, bem_element: Optional[BemElement]) -> None:
        self._throw_if_frozen("failed to set element part")
        self._elt = self._validated(elt=bem_element)["elt"]

    def set_elt(self, bem_element: Optional[BemElement] = None) -> "BemBase":
        self._elt = bem_element
        return self

    @property
    def mod(self) -> Optional[List[Optional[str]]]:
        """Copy of the modifier, ``[name]`` or ``[name, value]``."""
        return None if self._mod is None else list(self._mod)

    @mod.setter
    def mod(self, bem_modifier: Optional[BemModifier]) -> None:
        self._throw_if_frozen("failed to set modifier part")
        self._mod = _own_modifier(self._validated(mod=bem_modifier)["mod"])

    def set_mod(self, bem_modifier: Optional[BemModifier] = None) -> "BemBase":
        self._mod = (
            list(bem_modifier)
            if isinstance(bem_modifier, (list, tuple))
            else bem_modifier
        )
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "BemBase":
        self._frozen = True
        return self

    def clone(self) -> "BemBase":
        """Return an unfrozen copy that shares no state with this instance.

        Raises:
            BemError: If the parts were made invalid through the trusted path
        """
        return type(self)(self._as_object(), frozen=False)

    def is_valid(self) -> bool:
        """Whether the current parts still form a valid BEM structure.

        Only the trusted ``set_*`` path can make this false.
        """
        return validate_bem_object(self._as_object()).is_valid

    def to_bem_object(self) -> BemObject:
        return to_bem_object(self._as_object())

    def to_bem_string(self) -> BemString:
        return to_bem_string(self._as_object())

    def to_bem_vector(self) -> BemVector:
        return to_bem_vector(self._as_object())

    def to_query_selector(self) -> str:
        return f".{self.to_bem_string()}"

    def get_modifiers(
        self,
        class_names: Union[str, Sequence[str]],
        modifier_name: Optional[BemModifierName] = None,
    ) -> List[List[str]]:
        """Modifiers of this block/element found in a CSS class list."""
        return get_bem_modifiers(class_names, self, modifier_name)

    def has_modifier(
        self, class_names: Union[str, Sequence[str]], bem_modifier: BemModifier
    ) -> bool:
        return has_bem_modifier(class_names, self, bem_modifier)

    def __str__(self) -> str:
        return self.to_bem_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(blk={self._blk!r}, elt={self._elt!r}, "
            f"mod={self._mod!r}, frozen={self._frozen})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BemBase):
            return NotImplemented
        return (self._blk, self._elt, self._mod) == (other._blk, other._elt, other._mod)

    __hash__ = None  # mutable
