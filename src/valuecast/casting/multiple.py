"""Cast to one of multiple types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result
from valuecast.guessing.guesser import TypeGuesser
from valuecast.guessing.types import TypeDescriptor

if TYPE_CHECKING:
    from valuecast.typecast import TypeCast


class MultipleHandler(Handler):
    """Guess which of the types fits the value best, then cast to it.

    Example:
        handler = MultipleHandler(guesser).for_types([INTEGER, FLOAT])
        handler.using_typecast(typecast).cast("10.5")  # Result.ok(10.5)
    """

    def __init__(self, guesser: TypeGuesser | None = None):
        self.guesser = guesser if guesser is not None else TypeGuesser()
        self.types: tuple[TypeDescriptor, ...] = ()

    @property
    def type_name(self) -> str:
        return "|".join(str(t) for t in self.types)

    def for_type(self, descriptor: TypeDescriptor) -> Handler:
        return self.for_types([descriptor])

    def for_types(self, types: list[TypeDescriptor] | tuple[TypeDescriptor, ...]) -> Handler:
        """Get a handler for a set of types."""
        types = tuple(types)
        if types == self.types:
            return self
        return self._copy(types=types)

    def using_typecast(self, typecast: TypeCast) -> Handler:
        if self.typecast is typecast:
            return self
        return self._copy(typecast=typecast)

    def cast(self, value: Any) -> Result[Any]:
        if value is None:
            return Result.ok(None)
        if self.typecast is None:
            raise RuntimeError("Typecast for multiple handler not set")

        descriptor = self.guesser.guess_for(value, self.types)
        if descriptor is None:
            return self.dont_cast(value)

        return self.typecast.try_to(value, descriptor)
