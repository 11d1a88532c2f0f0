"""Cast to array, associative array, typed array or traversable class."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, TypeKind, ValueKind
from valuecast.guessing.registry import TypeRegistry, default_registry
from valuecast.guessing.types import (
    ARRAY,
    ASSOC,
    ArrayOf,
    NamedType,
    TypeDescriptor,
    UnionType,
)
from valuecast.guessing.values import ValueSnapshot, classify

if TYPE_CHECKING:
    from valuecast.typecast import TypeCast


class ArrayHandler(Handler):
    """Cast a value to a list or dict, optionally typed or wrapped.

    - ``array``: lists stay lists, mappings stay dicts
    - ``assoc``: always a dict (lists are keyed by index)
    - ``T[]``: every element is cast to T through the bound typecast
    - a traversable class (``collections.OrderedDict``): the collection is
      passed to the class constructor
    - ``A|T[]``: both of the above

    Scalars and plain objects become a single element list, an empty string
    becomes an empty list.
    """

    kinds = frozenset({TypeKind.ARRAY, TypeKind.ASSOC})

    def __init__(self, registry: TypeRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()
        self.subtype: TypeDescriptor | None = None
        self.traversable: NamedType | None = None
        self.assoc = False

    @property
    def type_name(self) -> str:
        if self.traversable is not None and self.subtype is not None:
            return str(UnionType(self.traversable, self.subtype))
        if self.traversable is not None:
            return str(self.traversable)
        if self.subtype is not None:
            return str(ArrayOf(self.subtype))
        return str(ASSOC if self.assoc else ARRAY)

    def for_type(self, descriptor: TypeDescriptor) -> Handler:
        subtype: TypeDescriptor | None = None
        traversable: NamedType | None = None

        if isinstance(descriptor, ArrayOf):
            subtype = descriptor.element
        elif isinstance(descriptor, UnionType):
            subtype, traversable = descriptor.element, descriptor.traversable
        elif isinstance(descriptor, NamedType) and self.registry.is_traversable(descriptor):
            traversable = descriptor
        elif descriptor not in (ARRAY, ASSOC):
            raise ValueError(f"Unable to use ArrayHandler for type '{descriptor}'")

        assoc = descriptor == ASSOC
        if (subtype, traversable, assoc) == (self.subtype, self.traversable, self.assoc):
            return self
        return self._copy(subtype=subtype, traversable=traversable, assoc=assoc)

    def using_typecast(self, typecast: TypeCast) -> Handler:
        if self.typecast is typecast:
            return self
        return self._copy(typecast=typecast)

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if snapshot.kind is ValueKind.RESOURCE:
            return self.dont_cast(value)

        # Strings are iterable, but are wrapped like any scalar
        if self.traversable is not None and self.subtype is None and not snapshot.is_scalar:
            cls = self.registry.resolve(self.traversable)
            if cls is not None and isinstance(value, cls):
                return Result.ok(value)

        items = self._to_items(snapshot)
        if self.assoc and isinstance(items, list):
            items = dict(enumerate(items))
        if self.subtype is not None:
            items = self._cast_each(items)
        if self.traversable is not None:
            return self._to_traversable(value, items)

        return Result.ok(items)

    def _to_items(self, snapshot: ValueSnapshot) -> list[Any] | dict[Any, Any]:
        value = snapshot.value

        if isinstance(value, Mapping):
            return dict(value)
        if snapshot.kind is ValueKind.LIST:
            return list(value)
        if snapshot.is_anonymous:
            return dict(vars(value))
        if snapshot.kind is ValueKind.STRING and value == "":
            return []
        return [value]

    def _cast_each(self, items: list[Any] | dict[Any, Any]) -> list[Any] | dict[Any, Any]:
        if self.typecast is None:
            raise RuntimeError("Typecast for array handler not set")

        assert self.subtype is not None
        if isinstance(items, dict):
            return {key: self.typecast.to(item, self.subtype) for key, item in items.items()}
        return [self.typecast.to(item, self.subtype) for item in items]

    def _to_traversable(self, value: Any, items: list[Any] | dict[Any, Any]) -> Result[Any]:
        assert self.traversable is not None
        cls = self.registry.resolve(self.traversable)

        if cls is None or not self.registry.is_traversable(self.traversable):
            return self.dont_cast(value, f"{self.traversable} is not traversable")
        if isinstance(items, cls):
            return Result.ok(items)

        try:
            return Result.ok(cls(items))
        except (TypeError, ValueError) as e:
            return self.dont_cast(value, str(e))
