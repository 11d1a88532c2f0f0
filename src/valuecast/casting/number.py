"""Cast to integer or float."""

from __future__ import annotations

import math
from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.types import BuiltinType, TypeDescriptor
from valuecast.guessing.values import classify


class NumberHandler(Handler):
    """Cast booleans, numbers and numeric strings to an integer or a float.

    An empty string is 0. Integers are truncated from floats, the same way
    ``int()`` does it.
    """

    kinds = frozenset({TypeKind.INTEGER, TypeKind.FLOAT})

    def __init__(self, kind: TypeKind = TypeKind.FLOAT):
        self.kind = kind

    @property
    def type_name(self) -> str:
        return self.kind.value

    def for_type(self, descriptor: TypeDescriptor) -> Handler:
        super().for_type(descriptor)
        assert isinstance(descriptor, BuiltinType)

        if descriptor.kind is self.kind:
            return self
        return self._copy(kind=descriptor.kind)

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if snapshot.kind in (ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT):
            return self._convert(value)
        if snapshot.kind is ValueKind.STRING:
            return self._parse(value)

        return self.dont_cast(value)

    def _parse(self, value: str) -> Result[Any]:
        text = value.strip()

        if not text:
            return Result.ok(0 if self.kind is TypeKind.INTEGER else 0.0)
        if not classify(text).is_numeric:
            return self.dont_cast(value)

        if self.kind is TypeKind.INTEGER and not any(c in text for c in ".eE"):
            return Result.ok(int(text))
        return self._convert(float(text))

    def _convert(self, number: Any) -> Result[Any]:
        if self.kind is TypeKind.INTEGER and isinstance(number, float):
            if not math.isfinite(number):
                return self.dont_cast(number, "not a finite number")

        try:
            return Result.ok(float(number) if self.kind is TypeKind.FLOAT else int(number))
        except OverflowError as e:
            return self.dont_cast(number, str(e))
