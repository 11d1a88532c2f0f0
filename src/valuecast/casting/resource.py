"""Cast to a resource."""

from __future__ import annotations

from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.values import classify


class ResourceHandler(Handler):
    """Resources (open files, sockets) can't be created from other values."""

    kinds = frozenset({TypeKind.RESOURCE})

    def cast(self, value: Any) -> Result[Any]:
        kind = classify(value).kind

        if kind in (ValueKind.NULL, ValueKind.RESOURCE):
            return Result.ok(value)
        return self.dont_cast(value)
