"""Type casting facade.

Resolves a type name to a handler and casts values with it:

    typecast = TypeCast()
    typecast.to("42", "int")                   # 42
    typecast.to(["1", "2"], "float[]")         # [1.0, 2.0]
    typecast.to("10.5", "integer|float")       # 10.5
    typecast.try_to("foo", "integer").error    # 'Unable to cast string "foo" to an integer'

``try_to`` returns a Result. ``to`` logs a failed cast and returns the value
unchanged, so a caller that prefers a best effort never has to branch.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from valuecast.casting import (
    ArrayHandler,
    BooleanHandler,
    ClassHandler,
    Handler,
    MixedHandler,
    MultipleHandler,
    NumberHandler,
    ObjectHandler,
    ResourceHandler,
    StringHandler,
)
from valuecast.core.config import Settings, get_settings
from valuecast.core.logging import get_logger
from valuecast.core.models.base import Result, TypeKind
from valuecast.guessing.guesser import TypeGuesser
from valuecast.guessing.registry import TypeRegistry, default_registry
from valuecast.guessing.types import (
    ArrayOf,
    BuiltinType,
    NamedType,
    TypeDescriptor,
    UnionType,
    parse_type,
)

logger = get_logger(__name__)


class TypeCast:
    """Cast values to a type given by name or descriptor."""

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        aliases: dict[str, str] | None = None,
        guesser: TypeGuesser | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the facade.

        Args:
            registry: Class lookup for named types (defaults to the standard registry)
            aliases: Extra type aliases, added to the configured ones
            guesser: Guesser used for multiple type casts
            settings: Settings (defaults to the cached application settings)
        """
        settings = settings or get_settings()

        self.registry = registry if registry is not None else default_registry()
        self.aliases: dict[str, str] = {**settings.type_aliases, **(aliases or {})}
        self.guesser = guesser if guesser is not None else TypeGuesser(registry=self.registry)

        self.handlers: dict[TypeKind, Handler] = {
            TypeKind.STRING: StringHandler(),
            TypeKind.INTEGER: NumberHandler(TypeKind.INTEGER),
            TypeKind.FLOAT: NumberHandler(TypeKind.FLOAT),
            TypeKind.BOOLEAN: BooleanHandler(),
            TypeKind.ARRAY: ArrayHandler(self.registry),
            TypeKind.ASSOC: ArrayHandler(self.registry),
            TypeKind.OBJECT: ObjectHandler(),
            TypeKind.RESOURCE: ResourceHandler(),
            TypeKind.MIXED: MixedHandler(),
        }
        self._array_handler = ArrayHandler(self.registry)
        self._class_handler = ClassHandler(self.registry)
        self._multiple_handler = MultipleHandler(self.guesser)

    def alias(self, alias: str, type_name: str) -> TypeCast:
        """Add an alias for a type name."""
        self.aliases[alias] = type_name
        return self

    def normalize_type(self, type_name: str) -> TypeDescriptor:
        """Resolve aliases and parse a type name.

        Raises:
            ValueError: If the name is malformed or is a multiple type
        """
        return parse_type(type_name, self.aliases)

    def get_handler(self, type_: str | TypeDescriptor) -> Handler:
        """Get a handler configured for the type.

        Raises:
            ValueError: For malformed names and for the null type
        """
        if isinstance(type_, str) and "|" in type_:
            types = [self.normalize_type(t) for t in type_.split("|")]
            return self._multiple_handler.for_types(types).using_typecast(self)

        descriptor = type_ if isinstance(type_, TypeDescriptor) else self.normalize_type(type_)

        if isinstance(descriptor, (ArrayOf, UnionType)):
            handler: Handler = self._array_handler
        elif isinstance(descriptor, NamedType):
            if self.registry.is_traversable(descriptor):
                handler = self._array_handler
            else:
                handler = self._class_handler
        else:
            assert isinstance(descriptor, BuiltinType)
            if descriptor.kind is TypeKind.NULL:
                raise ValueError("Unable to cast to null")
            handler = self.handlers[descriptor.kind]

        return handler.for_type(descriptor).using_typecast(self)

    def try_to(self, value: Any, type_: str | TypeDescriptor) -> Result[Any]:
        """Cast a value to a type.

        Returns:
            Result containing the cast value, or the reason it can't be cast
        """
        return self.get_handler(type_).cast(value)

    def to(self, value: Any, type_: str | TypeDescriptor) -> Any:
        """Cast a value to a type, returning the value unchanged if it can't be cast."""
        result = self.try_to(value, type_)
        if not result.success:
            logger.warning("cast_failed", target=str(type_), reason=result.error)
            return value
        return result.value


@lru_cache
def get_typecast() -> TypeCast:
    """Get the shared TypeCast instance."""
    return TypeCast()
