"""Cast to string."""

from __future__ import annotations

from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.values import classify


class StringHandler(Handler):
    """Cast scalars, dates and objects with a string form to a string.

    Booleans become ``"1"`` and ``""``, the forms the boolean handler reads
    back as True and False.
    """

    kinds = frozenset({TypeKind.STRING})

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if snapshot.kind is ValueKind.STRING:
            return Result.ok(value)
        if snapshot.kind is ValueKind.BOOLEAN:
            return Result.ok("1" if value else "")
        if snapshot.kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return Result.ok(str(value))
        if snapshot.kind is ValueKind.DATE:
            return Result.ok(value.isoformat())
        if snapshot.kind is ValueKind.OBJECT and snapshot.has_string_form:
            return Result.ok(str(value))

        return self.dont_cast(value)
