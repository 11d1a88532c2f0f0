"""Value classification.

A value is classified once per guessing pass into a ``ValueSnapshot``. Every
stage branches on the snapshot instead of probing the raw value again.
"""

from __future__ import annotations

import io
import mmap
import numbers
import re
import socket
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from types import SimpleNamespace
from typing import Any

from pydantic import BaseModel

from valuecast.core.models.base import ValueKind

# Strings that can be read as a boolean. Fixed and exhaustive.
BOOLEAN_FALSE_STRINGS: tuple[str, ...] = ("", "0", "false", "no", "off")
BOOLEAN_TRUE_STRINGS: tuple[str, ...] = ("1", "true", "yes", "on")
BOOLEAN_STRINGS: frozenset[str] = frozenset(BOOLEAN_FALSE_STRINGS + BOOLEAN_TRUE_STRINGS)

_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

RESOURCE_TYPES: tuple[type, ...] = (io.IOBase, socket.socket, mmap.mmap)


def is_numeric_string(value: str) -> bool:
    """Check if a string holds a decimal number (``"10"``, ``"-1.5"``, ``"1e3"``).

    Hex, ``inf`` and ``nan`` are not numeric.
    """
    return _NUMERIC_RE.match(value) is not None


def is_decimal_string(value: str) -> bool:
    """Check if a string is numeric and written with a decimal point."""
    return "." in value and is_numeric_string(value)


@dataclass(frozen=True)
class ValueSnapshot:
    """The classified shape of a runtime value.

    ``items`` holds the element values of list-like and associative values.
    One-shot iterators are never consumed, so their ``items`` are empty.
    """

    kind: ValueKind
    value: Any
    items: tuple[Any, ...] = ()
    has_string_form: bool = False
    is_anonymous: bool = False
    is_numeric: bool = False

    @property
    def is_scalar(self) -> bool:
        return self.kind.is_scalar

    @property
    def is_iterable(self) -> bool:
        return self.kind in (ValueKind.LIST, ValueKind.ASSOC)

    @property
    def is_associative(self) -> bool:
        return self.kind is ValueKind.ASSOC

    @property
    def is_float_like(self) -> bool:
        """A float, or a numeric string with a decimal point."""
        if self.kind is ValueKind.FLOAT:
            return True
        return self.kind is ValueKind.STRING and is_decimal_string(self.value)

    @property
    def is_integer_like(self) -> bool:
        """An integer, a boolean, or a numeric string without a decimal point."""
        if self.kind in (ValueKind.INTEGER, ValueKind.BOOLEAN):
            return True
        return self.kind is ValueKind.STRING and self.is_numeric and "." not in self.value

    @property
    def is_boolean_string(self) -> bool:
        return self.kind is ValueKind.STRING and self.value in BOOLEAN_STRINGS


def _has_string_form(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def classify(value: Any) -> ValueSnapshot:
    """Classify a value.

    Args:
        value: Any runtime value

    Returns:
        ValueSnapshot describing the value
    """
    if value is None:
        return ValueSnapshot(ValueKind.NULL, value)

    # bool is an Integral, so it must be checked first
    if isinstance(value, bool):
        return ValueSnapshot(ValueKind.BOOLEAN, value)

    if isinstance(value, numbers.Integral):
        return ValueSnapshot(ValueKind.INTEGER, value, is_numeric=True)

    if isinstance(value, numbers.Real):
        return ValueSnapshot(ValueKind.FLOAT, value, is_numeric=True)

    if isinstance(value, str):
        return ValueSnapshot(
            ValueKind.STRING,
            value,
            has_string_form=True,
            is_numeric=is_numeric_string(value),
        )

    if isinstance(value, Mapping):
        # A mapping without string keys is a sequence with explicit indexes
        if any(isinstance(key, str) for key in value):
            return ValueSnapshot(ValueKind.ASSOC, value, items=tuple(value.values()))
        return ValueSnapshot(ValueKind.LIST, value, items=tuple(value.values()))

    if isinstance(value, date):
        return ValueSnapshot(ValueKind.DATE, value, has_string_form=True)

    if isinstance(value, RESOURCE_TYPES):
        return ValueSnapshot(ValueKind.RESOURCE, value)

    # Models iterate over their fields but are records, not sequences
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray, BaseModel)):
        items = () if isinstance(value, Iterator) else tuple(value)
        return ValueSnapshot(ValueKind.LIST, value, items=items)

    return ValueSnapshot(
        ValueKind.OBJECT,
        value,
        has_string_form=_has_string_form(value),
        is_anonymous=type(value) is SimpleNamespace,
    )


def describe(value: Any) -> str:
    """Describe a value for diagnostics, e.g. ``string "foo"`` or ``a list``."""
    snapshot = classify(value)

    if snapshot.kind is ValueKind.STRING:
        return f'string "{value}"'
    if snapshot.kind is ValueKind.RESOURCE:
        return f"a {type(value).__name__} resource"
    if snapshot.kind is ValueKind.NULL:
        return "None"
    if snapshot.kind in (ValueKind.OBJECT, ValueKind.DATE):
        return f"a {type(value).__name__} object"

    name = type(value).__name__
    article = "an" if name[0].lower() in "aeiou" else "a"
    return f"{article} {name}"
