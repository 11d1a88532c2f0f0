"""Tests for the type guesser.

Covers the end-to-end behavior of guess_for: the documented examples,
precedence between candidates and the properties every guess holds.
"""

import io
import sys
from datetime import date, datetime
from types import SimpleNamespace

import pytest
from structlog.testing import capture_logs

from valuecast.core.logging import configure_logging
from valuecast.guessing import TypeGuesser
from valuecast.guessing.types import ArrayOf, UnionType, candidate_set

SCALARS = ["integer", "float", "boolean", "string"]


class TestScalarGuesses:
    """Tests for scalar values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "boolean"),
            (False, "boolean"),
            ("10.44", "float"),
            ("100", "integer"),
            (100, "integer"),
            (1.5, "float"),
            ("foo", "string"),
            ("yes", "string"),
        ],
    )
    def test_scalar_candidates(self, guesser, value, expected):
        """Scalars against integer, float, boolean and string."""
        assert guesser.guess_type(value, SCALARS) == expected

    def test_non_numeric_string_against_numbers(self, guesser):
        """A non-numeric string is neither integer nor float: no decision."""
        assert guesser.guess_for("foo", ["integer", "float"]) is None

    def test_boolean_string_against_boolean(self, guesser):
        """A vocabulary string is a boolean when string isn't an option."""
        assert guesser.guess_type("off", ["boolean", "integer[]"]) == "boolean"


class TestBooleanStringDateCombinations:
    """Tests for boolean, string and date-like candidates together."""

    CANDIDATES = ["boolean", "string", "DateTime"]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "boolean"),
            ("1", "string"),
            ("yes", "string"),
            ("2024-01-15", "DateTime"),
            ("tomorrow", "DateTime"),
            ("foo", "string"),
        ],
    )
    def test_combinations(self, guesser, value, expected):
        """Booleans stay booleans, date strings are dates, the rest are strings."""
        assert guesser.guess_type(value, self.CANDIDATES) == expected

    def test_date_predicate_is_pluggable(self, registry):
        """With a predicate that accepts anything, the date type wins over string."""
        guesser = TypeGuesser(registry=registry, is_date_string=lambda value: True)
        assert guesser.guess_type("1", self.CANDIDATES) == "DateTime"

    def test_integer_beats_date(self, guesser):
        """A timestamp is an integer when integer is an option."""
        assert guesser.guess_type(1700000000, ["DateTime", "integer"]) == "integer"

    def test_timestamp_as_date(self, guesser):
        """A timestamp is a date when date and string are the options."""
        assert guesser.guess_type(1700000000, ["DateTime", "string"]) == "DateTime"


class TestArrayGuesses:
    """Tests for list and associative values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([1, 2, 3], "integer[]"),
            ([1.0, 2.5], "float[]"),
            (["1", "2.5"], "float[]"),
            ((4, 5), "integer[]"),
        ],
    )
    def test_integer_or_float_array(self, guesser, value, expected):
        """Decimal elements decide between integer[] and float[]."""
        assert guesser.guess_type(value, ["integer[]", "float[]"]) == expected

    def test_plain_array_precedence(self, guesser):
        """A declared plain array wins over array-of-T for any list."""
        for value in ([1, 2], ["a"], [], [1.5, "x"]):
            assert guesser.guess_type(value, ["array", "integer[]"]) == "array"

    def test_element_types_filter(self, guesser):
        """Array types whose element doesn't fit are dropped."""
        assert guesser.guess_type(["a", "b"], ["integer[]", "string[]"]) == "string[]"

    def test_boolean_array(self, guesser):
        """Vocabulary strings make boolean[] win over string[]."""
        assert guesser.guess_type(["1", "0", "yes"], ["boolean[]", "string[]"]) == "boolean[]"

    def test_date_array(self, guesser):
        """Date strings make a date array win over string[]."""
        value = ["2024-01-15", "2024-02-01"]
        assert guesser.guess_type(value, ["string[]", "DateTime[]"]) == "DateTime[]"

    def test_assoc(self, guesser):
        """An associative value can't be a scalar."""
        assert guesser.guess_type({"a": 1}, ["integer", "string", "array"]) == "array"

    def test_scalar_wrapped_in_array(self, guesser):
        """A scalar against array types only is guessed as one element array."""
        assert guesser.guess_type("5", ["integer[]", "float[]"]) == "integer[]"
        assert guesser.guess_type("5.5", ["integer[]", "float[]"]) == "float[]"

    def test_scalar_against_plain_array(self, guesser):
        """A scalar against array and array-of-T is a plain array."""
        assert guesser.guess_type("5", ["integer[]", "array"]) == "array"


class TestUnionGuesses:
    """Tests for the traversable and array-of-T union."""

    @pytest.mark.parametrize("value", [{"a": "x"}, None])
    def test_union(self, guesser, value):
        """A traversable class and string[] are kept as a union."""
        result = guesser.guess_for(value, ["ArrayObject", "string[]"])
        assert isinstance(result, UnionType)
        assert str(result) == "ArrayObject|string[]"

    def test_union_order(self, guesser):
        """The traversable class comes first in the union."""
        result = guesser.guess_type({"a": "x"}, ["string[]", "ArrayObject"])
        assert result == "ArrayObject|string[]"

    def test_abstract_collection_union(self, guesser):
        """A list can be both an Iterable and an integer[]."""
        assert guesser.guess_type([1, 2], ["Iterable", "integer[]"]) == "Iterable|integer[]"


class TestObjectGuesses:
    """Tests for objects, dates and resources."""

    def test_named_object(self, guesser, registry):
        """An object is its own class."""
        money = registry.resolve("Money")(3)
        assert guesser.guess_type(money, ["string", "Money", "integer"]) == "Money"

    def test_named_object_in_array_types(self, guesser, registry):
        """An object declared as one of several array types is wrapped."""
        money = registry.resolve("Money")(3)
        assert guesser.guess_type(money, ["Money[]", "Point[]"]) == "Money[]"

    def test_anonymous_object(self, guesser):
        """An anonymous structure is an object."""
        assert guesser.guess_type(SimpleNamespace(a=1), ["object", "integer"]) == "object"

    def test_anonymous_object_is_ambiguous(self, guesser):
        """An anonymous structure can be an object or an array."""
        assert guesser.guess_for(SimpleNamespace(a=1), ["object", "array"]) is None

    def test_date_object(self, guesser):
        """A date object matches the date classes it is an instance of."""
        value = datetime(2024, 1, 15, 10, 30)
        assert guesser.guess_type(value, ["string", "datetime"]) == "datetime"
        assert guesser.guess_for(value, ["date", "datetime"]) is None
        assert guesser.guess_type(date(2024, 1, 15), ["date", "datetime"]) == "date"

    def test_resource(self, guesser):
        """A resource is only a resource."""
        with io.StringIO() as stream:
            assert guesser.guess_type(stream, ["string", "resource"]) == "resource"


class TestGuessProperties:
    """Tests for properties every guess holds."""

    VALUES = [True, "10.44", "100", "foo", 1.5, [1, 2], [1.5], {"a": 1}, None, "2024-01-15"]
    CANDIDATES = [
        ["integer", "float", "boolean", "string"],
        ["integer[]", "float[]"],
        ["array", "integer[]", "string"],
        ["null", "string", "DateTime"],
        ["ArrayObject", "string[]"],
    ]

    def test_deterministic(self, guesser):
        """The same input always gives the same guess."""
        for value in self.VALUES:
            for candidates in self.CANDIDATES:
                first = guesser.guess_for(value, candidates)
                assert all(guesser.guess_for(value, candidates) == first for _ in range(3))

    def test_single_candidate_is_returned(self, guesser):
        """A single declared type is returned, even when it doesn't fit."""
        assert guesser.guess_type("foo", ["integer"]) == "integer"
        assert guesser.guess_type([1], ["string"]) == "string"

    def test_null_is_never_returned(self, guesser):
        """null is never guessed."""
        assert guesser.guess_for(None, ["null"]) is None
        assert guesser.guess_type(None, ["null", "string"]) == "string"
        for value in self.VALUES:
            assert guesser.guess_type(value, ["null", "integer", "float"]) != "null"

    def test_result_comes_from_the_candidates(self, guesser):
        """A guess is a candidate, a union of two candidates, or an array of a guess."""
        for value in self.VALUES:
            for candidates in self.CANDIDATES:
                result = guesser.guess_for(value, candidates)
                declared = candidate_set(candidates)
                if result is None or result in declared:
                    continue
                if isinstance(result, UnionType):
                    assert result.traversable in declared
                    assert ArrayOf(result.element) in declared
                else:
                    assert isinstance(result, ArrayOf)
                    assert result in declared

    def test_empty_candidates(self, guesser):
        """No candidates, no decision."""
        assert guesser.guess_for("x", []) is None

    def test_aliases(self, registry):
        """Aliases apply to candidate names."""
        guesser = TypeGuesser(registry=registry, aliases={"int": "integer"})
        assert guesser.guess_type("100", ["int", "float"]) == "integer"

    @pytest.mark.parametrize("name", ["..Foo", "no_such_module.Thing", "this.Thing"])
    def test_unresolvable_class_names(self, guesser, name):
        """Class names that don't resolve never raise and never import."""
        module = name.rpartition(".")[0]
        was_loaded = module in sys.modules

        assert guesser.guess_type("x", ["string", name]) == "string"
        assert (module in sys.modules) == was_loaded

    def test_malformed_candidate(self, guesser):
        """A malformed type name raises."""
        with pytest.raises(ValueError):
            guesser.guess_for("x", ["integer", "[]"])


class TestGuessLogging:
    """Tests for the debug events of a guess."""

    def test_stages_are_logged(self, guesser):
        """Each narrowing stage and the conclusion are logged."""
        configure_logging(log_level="DEBUG")
        try:
            with capture_logs() as logs:
                guesser.guess_for("10.44", SCALARS)
        finally:
            configure_logging()

        stages = [log["stage"] for log in logs if log["event"] == "guess_stage"]
        assert stages == ["restrict_to_possible", "reduce_scalar_preferences"]
        assert logs[-1]["event"] == "guess_concluded"
        assert logs[-1]["result"] == "float"
