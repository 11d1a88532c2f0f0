"""Cast to mixed."""

from __future__ import annotations

from typing import Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind


class MixedHandler(Handler):
    kinds = frozenset({TypeKind.MIXED})

    def cast(self, value: Any) -> Result[Any]:
        return Result.ok(value)
