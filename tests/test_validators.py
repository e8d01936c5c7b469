"""Tests for structural BEM validators."""

import pytest

from bemkit.models import BemErrorKind
from bemkit.validators import (
    is_bem_object,
    is_bem_string,
    is_bem_vector,
    validate_bem_block,
    validate_bem_element,
    validate_bem_modifier,
    validate_bem_modifier_name,
    validate_bem_modifier_requirement,
    validate_bem_modifier_value,
    validate_bem_object,
    validate_bem_string,
    validate_bem_structure,
    validate_bem_vector,
)


class TestPartValidators:
    """Tests for block, element and modifier part validators."""

    def test_block_label(self):
        """Test block errors are labelled."""
        result = validate_bem_block("1foo")

        assert result.error.startswith("BEM block: BEM name:")
        assert result.value == "1foo"

    def test_element_label(self):
        """Test element errors are labelled."""
        assert validate_bem_element("bar-").error.startswith("BEM element: ")

    def test_modifier_name_label(self):
        """Test modifier name errors are labelled."""
        assert validate_bem_modifier_name("-x").error.startswith(
            "BEM modifier's name: "
        )

    def test_modifier_value_allows_leading_digit(self):
        """Test modifier values follow the value grammar."""
        assert validate_bem_modifier_value("1").is_valid
        assert validate_bem_modifier_value("1--2").error.startswith(
            "BEM modifier's value: BEM value: must conform constraints"
        )

    def test_valid_parts(self):
        """Test valid parts pass."""
        assert validate_bem_block("foo").to_dict() == {"value": "foo"}
        assert validate_bem_element("bar").to_dict() == {"value": "bar"}


class TestValidateBemModifier:
    """Tests for validate_bem_modifier."""

    def test_simple_modifier(self):
        """Test a modifier without value."""
        assert validate_bem_modifier(["foo"]).value == ["foo"]

    def test_full_modifier(self):
        """Test a modifier with value, given as a tuple."""
        assert validate_bem_modifier(("foo", "1")).value == ["foo", "1"]

    def test_none_value_is_simple_modifier(self):
        """Test a trailing None value is normalized away."""
        result = validate_bem_modifier(["foo", None])

        assert result.is_valid
        assert result.value == ["foo"]

    def test_invalid_name(self):
        """Test an invalid modifier name is reported."""
        result = validate_bem_modifier(["1foo", "bar"])

        assert result.kind == BemErrorKind.CONSTRAINT_VIOLATION
        assert result.error.startswith("BEM modifier: BEM modifier's name:")
        assert result.value == ["1foo", "bar"]

    def test_invalid_value_has_optional_message(self):
        """Test an invalid value gets the distinct optional value message."""
        result = validate_bem_modifier(["foo", "-x"])

        assert result.error == (
            "BEM modifier: optional BEM modifier's value: BEM value: must "
            "conform constraints but it doesn't -- str -x"
        )

    def test_not_an_array(self):
        """Test a string is not a modifier."""
        assert validate_bem_modifier("foo").kind == BemErrorKind.NOT_AN_ARRAY

    def test_too_many_values(self):
        """Test more than one value is rejected."""
        result = validate_bem_modifier(["foo", "1", "2"])

        assert result.kind == BemErrorKind.TOO_MANY_PARTS
        assert result.error.endswith("-- foo 1, 2")

    def test_empty_modifier(self):
        """Test an empty modifier lacks a name."""
        assert validate_bem_modifier([]).kind == BemErrorKind.NOT_A_STRING


class TestValidateBemModifierRequirement:
    """Tests for validate_bem_modifier_requirement."""

    def test_negate_defaults_to_false(self):
        """Test the negation flag defaults to False."""
        assert validate_bem_modifier_requirement(["foo"]).value == ["foo", None, False]

    def test_full_requirement(self):
        """Test a negated full requirement is kept as-is."""
        result = validate_bem_modifier_requirement(("foo", "bar", True))

        assert result.value == ["foo", "bar", True]

    def test_invalid_modifier(self):
        """Test modifier errors are propagated with a label."""
        result = validate_bem_modifier_requirement(["foo", "b--r"])

        assert result.error.startswith(
            "BEM modifier requirement: BEM modifier: optional"
        )

    def test_too_long(self):
        """Test more than three items are rejected."""
        result = validate_bem_modifier_requirement(["foo", "bar", True, 1])

        assert result.kind == BemErrorKind.TOO_MANY_PARTS

    def test_not_an_array(self):
        """Test non-sequences are rejected."""
        assert (
            validate_bem_modifier_requirement({"foo": 1}).kind
            == BemErrorKind.NOT_AN_ARRAY
        )

    def test_non_boolean_negate(self):
        """Test the negation flag must be a bool."""
        result = validate_bem_modifier_requirement(["foo", None, "yes"])

        assert result.kind == BemErrorKind.CONSTRAINT_VIOLATION
        assert "negation flag" in result.error


class TestValidateBemObject:
    """Tests for validate_bem_object."""

    def test_valid_object(self):
        """Test a full object validates to itself."""
        bem_object = {"blk": "foo", "elt": "bar", "mod": ["fiz", "buz"]}
        result = validate_bem_object(bem_object)

        assert result.is_valid
        assert result.value == bem_object

    def test_none_parts_are_absent(self):
        """Test None element and modifier are treated as absent."""
        assert validate_bem_object({"blk": "foo", "elt": None, "mod": None}).is_valid

    def test_block_checked_first(self):
        """Test the block error wins over element and modifier errors."""
        result = validate_bem_object({"blk": "1", "elt": "2", "mod": ["3"]})

        assert result.error.startswith("BEM object: BEM block:")

    def test_element_checked_before_modifier(self):
        """Test the element error wins over the modifier error."""
        result = validate_bem_object({"blk": "foo", "elt": "2", "mod": ["3"]})

        assert result.error.startswith("BEM object: BEM element:")

    def test_invalid_modifier(self):
        """Test modifier errors are reported last."""
        result = validate_bem_object({"blk": "foo", "mod": ["3"]})

        assert result.error.startswith("BEM object: BEM modifier:")

    def test_missing_block(self):
        """Test the block is required."""
        result = validate_bem_object({"elt": "bar"})

        assert result.kind == BemErrorKind.NOT_A_STRING

    def test_empty_element_is_invalid(self):
        """Test an empty element is present and invalid."""
        assert not validate_bem_object({"blk": "foo", "elt": ""}).is_valid

    def test_not_an_object(self):
        """Test non-mappings are rejected."""
        result = validate_bem_object(["foo"])

        assert result.kind == BemErrorKind.NOT_A_PLAIN_OBJECT


class TestValidateBemVector:
    """Tests for validate_bem_vector."""

    @pytest.mark.parametrize(
        "vector",
        [["foo"], ["foo", "bar"], ["foo", None, ["mod"]], ("foo", "bar", ("mod", "1"))],
    )
    def test_valid_vectors(self, vector):
        """Test vectors of one to three positions."""
        assert validate_bem_vector(vector).is_valid

    def test_too_long(self):
        """Test more than three positions are rejected."""
        result = validate_bem_vector(["foo", "bar", ["mod"], "extra"])

        assert result.kind == BemErrorKind.TOO_MANY_PARTS
        assert result.error.startswith("BEM vector: must be an array of one")

    def test_positional_errors(self):
        """Test positional parts use the same rules as objects."""
        result = validate_bem_vector(["foo", "b--r"])

        assert result.error.startswith("BEM vector: BEM element:")

    def test_not_an_array(self):
        """Test strings are not vectors."""
        assert validate_bem_vector("foo").kind == BemErrorKind.NOT_AN_ARRAY


class TestValidateBemString:
    """Tests for validate_bem_string."""

    @pytest.mark.parametrize(
        "bem_string",
        [
            "foo",
            "foo__bar",
            "foo--mod",
            "foo--mod_1",
            "foo__bar--fiz_buz",
            "a__b--c_d",
            "foo-bar__baz-qux--is-on_yes-please",
        ],
    )
    def test_valid_strings(self, bem_string):
        """Test every combination of parts."""
        assert validate_bem_string(bem_string).to_dict() == {"value": bem_string}

    def test_only_one_modifier(self):
        """Test more than one modifier part is rejected."""
        result = validate_bem_string("blk--mod1--mod2_2")

        assert result.kind == BemErrorKind.TOO_MANY_PARTS
        assert result.error == (
            "BEM string: can have only one BEM modifier but 2 of them found "
            "-- mod1, mod2_2"
        )

    def test_only_one_modifier_value(self):
        """Test more than one modifier value is rejected."""
        result = validate_bem_string("blk--mod_1_2")

        assert result.kind == BemErrorKind.TOO_MANY_PARTS
        assert result.error == (
            "BEM string: modifier can have only one value but 2 of them found "
            "-- 1, 2"
        )

    def test_only_one_element(self):
        """Test more than one element part is rejected."""
        result = validate_bem_string("blk__one__two")

        assert result.kind == BemErrorKind.TOO_MANY_PARTS
        assert "can have only one BEM element but 2 of them found" in result.error

    @pytest.mark.parametrize("bem_string", ["", "   ", "\t"])
    def test_blank_fails_at_block(self, bem_string):
        """Test blank input fails block validation."""
        result = validate_bem_string(bem_string)

        assert result.error.startswith("BEM string: BEM block:")

    @pytest.mark.parametrize(
        "bem_string,label",
        [
            ("foo--", "BEM modifier's name"),
            ("foo--mod_", "optional BEM modifier's value"),
            ("foo__", "BEM element"),
            ("foo___bar", "BEM element"),
            ("__bar", "BEM block"),
            ("foo---bar", "BEM modifier's name"),
            ("1foo__bar", "BEM block"),
        ],
    )
    def test_invalid_parts(self, bem_string, label):
        """Test the failing part is named in the error."""
        result = validate_bem_string(bem_string)

        assert not result.is_valid
        assert label in result.error

    def test_modifier_checked_before_block(self):
        """Test parts are checked right to left."""
        result = validate_bem_string("1foo--2bar")

        assert "BEM modifier's name" in result.error

    def test_not_a_string(self):
        """Test non-strings are rejected."""
        assert validate_bem_string(["foo"]).kind == BemErrorKind.NOT_A_STRING


class TestValidateBemStructure:
    """Tests for shape dispatch."""

    def test_dispatch(self):
        """Test strings, vectors and objects are all accepted."""
        assert validate_bem_structure("foo__bar").is_valid
        assert validate_bem_structure(["foo", "bar"]).is_valid
        assert validate_bem_structure({"blk": "foo", "elt": "bar"}).is_valid

    def test_errors_are_labelled(self):
        """Test the dispatched validator error keeps its own label."""
        result = validate_bem_structure("foo__1")

        assert result.error.startswith("BEM structure: BEM string: BEM element:")

    @pytest.mark.parametrize("value", [None, 42, 1.5, object()])
    def test_unrecognized_structure(self, value):
        """Test values of any other shape are rejected."""
        result = validate_bem_structure(value)

        assert result.kind == BemErrorKind.UNRECOGNIZED_STRUCTURE
        assert "must be a BEM object|string|vector" in result.error

    def test_shape_guards(self):
        """Test runtime shape guards."""
        assert is_bem_string("foo")
        assert is_bem_vector(["foo"]) and is_bem_vector(("foo",))
        assert is_bem_object({"blk": "foo"})
        assert not is_bem_object(["foo"])
