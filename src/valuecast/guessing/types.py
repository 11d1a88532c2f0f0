"""Type descriptors.

A type descriptor is an immutable tag naming a target type. Descriptors
compare and hash case-insensitively on their rendered name, so ``DateTime``
and ``datetime`` are the same candidate.

Type-name strings enter through ``parse_type``; that is the only place where
malformed names are rejected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from valuecast.core.models.base import TypeKind

_BUILTIN_NAMES = {kind.value: kind for kind in TypeKind}


class TypeDescriptor(ABC):
    """Base class for all type descriptors."""

    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """The rendered type name, e.g. ``integer[]``."""

    @property
    def key(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass(frozen=True, eq=False, slots=True)
class BuiltinType(TypeDescriptor):
    """A builtin scalar or structural type (string, integer, array, ...)."""

    kind: TypeKind

    @property
    def name(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"BuiltinType({self.kind.value!r})"


@dataclass(frozen=True, eq=False, slots=True)
class NamedType(TypeDescriptor):
    """A class, interface or date-like type, referenced by name."""

    type_name: str

    @property
    def name(self) -> str:
        return self.type_name

    def __repr__(self) -> str:
        return f"NamedType({self.type_name!r})"


@dataclass(frozen=True, eq=False, slots=True)
class ArrayOf(TypeDescriptor):
    """An array whose elements are all of ``element`` type."""

    element: TypeDescriptor

    @property
    def name(self) -> str:
        return f"{self.element.name}[]"

    def __repr__(self) -> str:
        return f"ArrayOf({self.element!r})"


@dataclass(frozen=True, eq=False, slots=True)
class UnionType(TypeDescriptor):
    """A traversable class holding elements of ``element`` type.

    Only produced by the guesser when a value can't be narrowed between a
    traversable class and an array-of-T. Never parsed from input.
    """

    traversable: NamedType
    element: TypeDescriptor

    @property
    def name(self) -> str:
        return f"{self.traversable.name}|{self.element.name}[]"

    def __repr__(self) -> str:
        return f"UnionType({self.traversable!r}, {self.element!r})"


STRING = BuiltinType(TypeKind.STRING)
INTEGER = BuiltinType(TypeKind.INTEGER)
FLOAT = BuiltinType(TypeKind.FLOAT)
BOOLEAN = BuiltinType(TypeKind.BOOLEAN)
ARRAY = BuiltinType(TypeKind.ARRAY)
ASSOC = BuiltinType(TypeKind.ASSOC)
OBJECT = BuiltinType(TypeKind.OBJECT)
RESOURCE = BuiltinType(TypeKind.RESOURCE)
NULL = BuiltinType(TypeKind.NULL)
MIXED = BuiltinType(TypeKind.MIXED)


def parse_type(name: str, aliases: Mapping[str, str] | None = None) -> TypeDescriptor:
    """Parse a type name into a descriptor.

    A trailing ``[]`` means "array of" and may repeat (``integer[][]``).
    Builtin names are case-insensitive, other names are kept as given.

    Args:
        name: Type name, e.g. ``"integer"``, ``"DateTime[]"``
        aliases: Optional alias table applied to the base name (``int`` -> ``integer``)

    Returns:
        The parsed type descriptor

    Raises:
        ValueError: If the name is empty, has an empty base before ``[]`` or
            contains a ``|`` (unions are split by the caller)
    """
    name = name.strip()

    if not name:
        raise ValueError("Type name is empty")
    if "|" in name:
        raise ValueError(f"Invalid type name '{name}': unions must be split before parsing")

    if name.endswith("[]"):
        base = name[:-2]
        if not base.strip():
            raise ValueError(f"Invalid type name '{name}': missing element type before '[]'")
        return ArrayOf(parse_type(base, aliases))

    if aliases:
        name = aliases.get(name, aliases.get(name.lower(), name))
        # An alias may itself point at an array type
        if name.endswith("[]"):
            return parse_type(name)

    kind = _BUILTIN_NAMES.get(name.lower())
    if kind is not None:
        return BuiltinType(kind)

    return NamedType(name)


def candidate_set(
    types: Iterable[str | TypeDescriptor],
    aliases: Mapping[str, str] | None = None,
) -> tuple[TypeDescriptor, ...]:
    """Build an ordered, duplicate-free candidate set.

    The first occurrence of a type wins; later duplicates are dropped.
    """
    seen: set[TypeDescriptor] = set()
    candidates: list[TypeDescriptor] = []

    for entry in types:
        descriptor = entry if isinstance(entry, TypeDescriptor) else parse_type(entry, aliases)
        if descriptor not in seen:
            seen.add(descriptor)
            candidates.append(descriptor)

    return tuple(candidates)


def element_types(candidates: Iterable[TypeDescriptor]) -> tuple[TypeDescriptor, ...]:
    """Get the element types of all array-of-T candidates, in order."""
    return tuple(c.element for c in candidates if isinstance(c, ArrayOf))
