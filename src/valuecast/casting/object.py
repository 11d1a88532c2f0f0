"""Cast to a generic object."""

from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.values import classify


class ObjectHandler(Handler):
    """Cast mappings and lists to a ``SimpleNamespace``.

    List indexes and other non-string keys become string attribute names.
    Objects are passed through as they are.
    """

    kinds = frozenset({TypeKind.OBJECT})

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if snapshot.kind in (ValueKind.OBJECT, ValueKind.DATE):
            return Result.ok(value)

        if snapshot.is_iterable:
            pairs = value.items() if isinstance(value, Mapping) else enumerate(value)
            return Result.ok(SimpleNamespace(**{str(key): item for key, item in pairs}))

        return self.dont_cast(value)
