"""Base class for cast handlers.

A handler converts a value to one family of types. Handlers are immutable
in use: ``for_type`` and ``using_typecast`` return ``self`` when nothing
changes and a configured copy otherwise, so a shared handler is never
modified by a caller.

Expected failures (a value that can't be cast) are returned as
``Result.fail``; using a handler for a type it doesn't handle is a
programming error and raises.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from valuecast.core.models.base import Result, TypeKind
from valuecast.guessing.types import BuiltinType, TypeDescriptor
from valuecast.guessing.values import describe

if TYPE_CHECKING:
    from valuecast.typecast import TypeCast


def unable_to_cast(value: Any, type_name: str, explain: str | None = None) -> str:
    """Build the message for a failed cast.

    Example:
        Unable to cast string "foo" to a float
    """
    if "|" not in type_name:
        article = "an" if type_name[:1].lower() in ("a", "e", "i", "o", "u") else "a"
        type_name = f"{article} {type_name}"

    message = f"Unable to cast {describe(value)} to {type_name}"
    return f"{message}: {explain}" if explain else message


class Handler(ABC):
    """Cast a value to a type."""

    # Builtin type kinds the handler accepts in for_type
    kinds: ClassVar[frozenset[TypeKind]] = frozenset()

    typecast: TypeCast | None = None

    @property
    def type_name(self) -> str:
        """Name of the target type, used in failure messages."""
        return next(iter(self.kinds)).value

    def for_type(self, descriptor: TypeDescriptor) -> Handler:
        """Get a handler for the type.

        Raises:
            ValueError: If the handler can't cast to the type
        """
        if not isinstance(descriptor, BuiltinType) or descriptor.kind not in self.kinds:
            raise ValueError(f"Unable to use {type(self).__name__} for type '{descriptor}'")
        return self

    def using_typecast(self, typecast: TypeCast) -> Handler:
        """Get a handler bound to a typecast (only needed to cast nested values)."""
        return self

    @abstractmethod
    def cast(self, value: Any) -> Result[Any]:
        """Cast the value.

        Args:
            value: Value to cast

        Returns:
            Result containing the cast value, or the reason it can't be cast
        """

    def dont_cast(self, value: Any, explain: str | None = None) -> Result[Any]:
        return Result.fail(unable_to_cast(value, self.type_name, explain))

    def _copy(self, **changes: Any) -> Handler:
        handler = copy.copy(self)
        for name, change in changes.items():
            setattr(handler, name, change)
        return handler
