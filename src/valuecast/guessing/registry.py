"""Type registry.

Maps type names to Python classes and answers the class questions the
guesser asks: is this name traversable, is a value an instance of it, is it
date-like. The guesser only talks to this interface, so callers can register
their own classes or supply a different registry.
"""

from __future__ import annotations

import inspect
import sys
from collections.abc import Collection, Iterable, Iterator, Mapping, Sequence
from datetime import date, datetime
from types import SimpleNamespace
from typing import Any

from valuecast.guessing.types import NamedType, TypeDescriptor

DATE_LIKE_BASES: tuple[type, ...] = (date,)


class TypeRegistry:
    """Name to class lookup.

    Registered names are case-insensitive. Names that aren't registered but
    look like a dotted path (``collections.OrderedDict``) are looked up in the
    modules that are already loaded. Nothing is imported.
    """

    def __init__(self, classes: Mapping[str, type] | None = None):
        self._classes: dict[str, type] = {}
        for name, cls in (classes or {}).items():
            self.register(cls, name)

    def register(self, cls: type, name: str | None = None) -> TypeRegistry:
        """Register a class under a name (defaults to the class name)."""
        self._classes[(name or cls.__name__).lower()] = cls
        return self

    def resolve(self, descriptor: TypeDescriptor | str) -> type | None:
        """Get the class for a named type.

        Returns:
            The class, or None for builtin types and unknown names
        """
        if isinstance(descriptor, TypeDescriptor):
            if not isinstance(descriptor, NamedType):
                return None
            name = descriptor.name
        else:
            name = descriptor

        cls = self._classes.get(name.lower())
        if cls is not None:
            return cls

        return _loaded_class(name)

    def is_instance(self, value: Any, descriptor: TypeDescriptor) -> bool:
        cls = self.resolve(descriptor)
        return cls is not None and isinstance(value, cls)

    def is_traversable(self, descriptor: TypeDescriptor) -> bool:
        """A class whose instances can be iterated over (not a string type)."""
        cls = self.resolve(descriptor)
        return (
            cls is not None
            and issubclass(cls, Iterable)
            and not issubclass(cls, (str, bytes, bytearray))
        )

    def accepts_traversable(self, descriptor: TypeDescriptor) -> bool:
        """An abstract collection interface that any plain list satisfies.

        ``Iterable`` and ``Sequence`` accept a list as is; a concrete class
        like ``OrderedDict`` does not.
        """
        cls = self.resolve(descriptor)
        return (
            cls is not None
            and cls is not object
            and inspect.isabstract(cls)
            and issubclass(list, cls)
        )

    def is_date_like(self, descriptor: TypeDescriptor) -> bool:
        cls = self.resolve(descriptor)
        return cls is not None and issubclass(cls, DATE_LIKE_BASES)

    def is_generic_object(self, descriptor: TypeDescriptor) -> bool:
        """The marker class for anonymous structures."""
        return self.resolve(descriptor) is SimpleNamespace


def _loaded_class(name: str) -> type | None:
    # Only modules that are already loaded
    module_name, _, attr = name.rpartition(".")
    if not module_name or not all(part.isidentifier() for part in name.split(".")):
        return None

    module = sys.modules.get(module_name)
    cls = getattr(module, attr, None) if module is not None else None
    return cls if inspect.isclass(cls) else None


def default_registry() -> TypeRegistry:
    """Create a registry with the standard library classes pre-registered."""
    return TypeRegistry(
        {
            "datetime": datetime,
            "date": date,
            "Iterable": Iterable,
            "Iterator": Iterator,
            "Sequence": Sequence,
            "Collection": Collection,
            "Mapping": Mapping,
            "SimpleNamespace": SimpleNamespace,
            "stdClass": SimpleNamespace,
        }
    )
