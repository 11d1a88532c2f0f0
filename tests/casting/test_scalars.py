"""Tests for the string, number and boolean handlers."""

import io
import math
from datetime import date, datetime
from types import SimpleNamespace

import pytest

from valuecast.casting import BooleanHandler, NumberHandler, StringHandler
from valuecast.core.models.base import TypeKind
from valuecast.guessing.types import BOOLEAN, FLOAT, INTEGER, STRING, ArrayOf, NamedType


class Label:
    def __str__(self):
        return "label"


class TestNumberHandlerFloat:
    """Tests for NumberHandler casting to float."""

    @pytest.fixture
    def handler(self) -> NumberHandler:
        return NumberHandler().for_type(FLOAT)

    def test_for_same_type_returns_self(self, handler):
        """Configuring the same type returns the same handler."""
        assert handler.for_type(FLOAT) is handler

    def test_using_typecast_returns_self(self, handler, typecast):
        """Numbers don't need a typecast."""
        assert handler.using_typecast(typecast) is handler

    @pytest.mark.parametrize("descriptor", [STRING, NamedType("foo"), ArrayOf(FLOAT)])
    def test_for_type_invalid(self, handler, descriptor):
        """Other types are a programming error."""
        with pytest.raises(ValueError):
            handler.for_type(descriptor)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            (10.44, 10.44),
            (-5.22, -5.22),
            (1, 1.0),
            (True, 1.0),
            (False, 0.0),
            ("100", 100.0),
            ("10.44", 10.44),
            ("-10.44", -10.44),
            (" 2.5 ", 2.5),
            ("1e3", 1000.0),
            ("", 0.0),
        ],
    )
    def test_cast(self, handler, value, expected):
        """Numbers, booleans and numeric strings cast to float."""
        result = handler.cast(value)
        assert result.success
        assert result.value == expected
        if expected is not None:
            assert isinstance(result.value, float)

    def test_cast_infinity(self, handler):
        """Infinity stays infinity."""
        assert handler.cast(math.inf).value == math.inf

    def test_cast_random_string(self, handler):
        """A non-numeric string fails."""
        result = handler.cast("foo")
        assert not result.success
        assert result.error == 'Unable to cast string "foo" to a float'

    def test_cast_list(self, handler):
        result = handler.cast([10, 20])
        assert result.error == "Unable to cast a list to a float"

    def test_cast_object(self, handler):
        result = handler.cast(SimpleNamespace(foo="bar"))
        assert result.error == "Unable to cast a SimpleNamespace object to a float"

    def test_cast_resource(self, handler):
        with io.BytesIO() as stream:
            result = handler.cast(stream)
        assert result.error == "Unable to cast a BytesIO resource to a float"


class TestNumberHandlerInteger:
    """Tests for NumberHandler casting to integer."""

    @pytest.fixture
    def handler(self) -> NumberHandler:
        return NumberHandler().for_type(INTEGER)

    def test_for_type_copies(self):
        """Configuring another kind returns a new handler."""
        handler = NumberHandler()
        integer = handler.for_type(INTEGER)

        assert integer is not handler
        assert integer.kind == TypeKind.INTEGER
        assert handler.kind == TypeKind.FLOAT

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            (10, 10),
            (10.44, 10),
            (-5.9, -5),
            (True, 1),
            (False, 0),
            ("100", 100),
            ("-7", -7),
            ("10.44", 10),
            ("", 0),
            ("12345678901234567890", 12345678901234567890),
        ],
    )
    def test_cast(self, handler, value, expected):
        """Numbers, booleans and numeric strings cast to integer."""
        result = handler.cast(value)
        assert result.success
        assert result.value == expected

    def test_cast_infinity(self, handler):
        """Infinity isn't an integer."""
        result = handler.cast(math.inf)
        assert result.error == "Unable to cast a float to an integer: not a finite number"

    def test_cast_random_string(self, handler):
        result = handler.cast("foo")
        assert result.error == 'Unable to cast string "foo" to an integer'


class TestStringHandler:
    """Tests for StringHandler."""

    @pytest.fixture
    def handler(self) -> StringHandler:
        return StringHandler().for_type(STRING)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            ("foo", "foo"),
            ("", ""),
            (1, "1"),
            (-1.5, "-1.5"),
            (True, "1"),
            (False, ""),
            (date(2024, 1, 15), "2024-01-15"),
            (datetime(2024, 1, 15, 10, 30), "2024-01-15T10:30:00"),
            (Label(), "label"),
        ],
    )
    def test_cast(self, handler, value, expected):
        """Scalars, dates and objects with a string form cast to string."""
        assert handler.cast(value).value == expected

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, SimpleNamespace(a=1), object()])
    def test_cast_fails(self, handler, value):
        """Containers and plain objects can't be a string."""
        result = handler.cast(value)
        assert not result.success
        assert result.error.endswith("to a string")


class TestBooleanHandler:
    """Tests for BooleanHandler."""

    @pytest.fixture
    def handler(self) -> BooleanHandler:
        return BooleanHandler().for_type(BOOLEAN)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            (True, True),
            (False, False),
            (1, True),
            (0, False),
            (0.5, True),
            ("1", True),
            ("true", True),
            ("YES", True),
            (" on ", True),
            ("0", False),
            ("false", False),
            ("No", False),
            ("off", False),
            ("", False),
        ],
    )
    def test_cast(self, handler, value, expected):
        """Numbers and vocabulary strings cast to boolean."""
        result = handler.cast(value)
        assert result.success
        assert result.value is expected

    @pytest.mark.parametrize("value", ["maybe", "2", [True], {"a": True}, object()])
    def test_cast_fails(self, handler, value):
        """Anything else fails."""
        result = handler.cast(value)
        assert not result.success
        assert result.error.endswith("to a boolean")
