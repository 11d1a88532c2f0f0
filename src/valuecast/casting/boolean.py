"""Cast to boolean."""

from __future__ import annotations

from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.values import BOOLEAN_FALSE_STRINGS, BOOLEAN_TRUE_STRINGS, classify


class BooleanHandler(Handler):
    """Cast numbers and boolean strings to a boolean.

    Strings are trimmed and compared case-insensitively against the boolean
    vocabulary (``"yes"``, ``"off"``, ``"1"``, ...). Any other string fails.
    """

    kinds = frozenset({TypeKind.BOOLEAN})

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if snapshot.kind is ValueKind.BOOLEAN:
            return Result.ok(value)
        if snapshot.kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return Result.ok(bool(value))

        if snapshot.kind is ValueKind.STRING:
            text = value.strip().lower()
            if text in BOOLEAN_TRUE_STRINGS:
                return Result.ok(True)
            if text in BOOLEAN_FALSE_STRINGS:
                return Result.ok(False)

        return self.dont_cast(value)
