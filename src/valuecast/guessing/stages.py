"""Narrowing stages of the type guesser.

Each stage is a pure function taking the current candidates, the value
snapshot and the guess context, and returning the candidates that remain.
Stages never add candidates, except ``prefer_array_for_scalar`` which can
collapse a set of array types into the single array type it guessed.

The guesser treats an empty stage result as "no change"; stages themselves
may return an empty tuple.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from valuecast.core.models.base import TypeKind, ValueKind
from valuecast.guessing.registry import TypeRegistry
from valuecast.guessing.types import (
    ARRAY,
    ASSOC,
    BOOLEAN,
    FLOAT,
    INTEGER,
    NULL,
    OBJECT,
    RESOURCE,
    STRING,
    ArrayOf,
    BuiltinType,
    NamedType,
    TypeDescriptor,
    UnionType,
    element_types,
)
from valuecast.guessing.values import ValueSnapshot, classify

Candidates = tuple[TypeDescriptor, ...]

_SCALAR_TYPES = (STRING, INTEGER, FLOAT, BOOLEAN)
_NEVER_SCALAR = frozenset(
    {TypeKind.ARRAY, TypeKind.ASSOC, TypeKind.OBJECT, TypeKind.RESOURCE, TypeKind.NULL}
)
_NEVER_ASSOC = frozenset({STRING, INTEGER, FLOAT, BOOLEAN, RESOURCE})

BOOLEAN_ARRAY = ArrayOf(BOOLEAN)
STRING_ARRAY = ArrayOf(STRING)
INTEGER_ARRAY = ArrayOf(INTEGER)
FLOAT_ARRAY = ArrayOf(FLOAT)


@dataclass(frozen=True)
class GuessContext:
    """Collaborators a stage may consult.

    Attributes:
        registry: Class lookup for named types
        is_date_string: Predicate telling if a string reads as a date/time
        guess: Entry point of the guesser, for element-type sub-guesses
    """

    registry: TypeRegistry
    is_date_string: Callable[[str], bool]
    guess: Callable[[Any, Iterable[TypeDescriptor]], TypeDescriptor | None]

    def is_date_like(self, descriptor: TypeDescriptor) -> bool:
        return isinstance(descriptor, NamedType) and self.registry.is_date_like(descriptor)

    def is_date_like_array(self, descriptor: TypeDescriptor) -> bool:
        return isinstance(descriptor, ArrayOf) and self.is_date_like(descriptor.element)


def _without(candidates: Candidates, remove: Iterable[TypeDescriptor]) -> Candidates:
    removed = set(remove)
    return tuple(c for c in candidates if c not in removed)


# === Stage: remove-null ===


def remove_null(candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext) -> Candidates:
    """Drop the null type; null-ness is the caller's business."""
    return _without(candidates, [NULL])


# === Stage: restrict-to-possible ===


def restrict_to_possible(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    """Keep only the candidates the value could be cast to."""
    if len(candidates) < 2:
        return candidates

    return possible_types(candidates, snapshot, ctx)


def possible_types(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    """Get the candidates that are possible for the value.

    Args:
        candidates: Types to filter
        snapshot: Classified value
        ctx: Guess context

    Returns:
        The possible candidates, in their original order. May be empty.
    """
    if not candidates:
        return ()

    if snapshot.is_scalar:
        return tuple(c for c in candidates if _is_possible_for_scalar(c, snapshot, ctx))
    if snapshot.kind is ValueKind.LIST:
        return _possible_for_list(candidates, snapshot, ctx)
    if snapshot.kind is ValueKind.ASSOC:
        return tuple(
            c for c in candidates if c not in _NEVER_ASSOC and not ctx.is_date_like(c)
        )
    if snapshot.kind is ValueKind.OBJECT:
        return tuple(c for c in candidates if _is_possible_for_object(c, snapshot, ctx))
    if snapshot.kind is ValueKind.DATE:
        return tuple(
            c
            for c in candidates
            if isinstance(c, NamedType) and ctx.registry.is_instance(snapshot.value, c)
        )

    # Resources and anything else: only an exact match on the kind
    return tuple(c for c in candidates if c.key == snapshot.kind.value)


def _is_possible_for_scalar(
    candidate: TypeDescriptor, snapshot: ValueSnapshot, ctx: GuessContext
) -> bool:
    kind = snapshot.kind
    non_numeric_string = kind is ValueKind.STRING and not snapshot.is_numeric

    if isinstance(candidate, (ArrayOf, UnionType)):
        return False

    if candidate == STRING:
        return kind is not ValueKind.BOOLEAN
    if candidate == INTEGER:
        return not non_numeric_string
    if candidate == FLOAT:
        return kind is not ValueKind.BOOLEAN and not non_numeric_string
    if candidate == BOOLEAN:
        return kind is not ValueKind.STRING or snapshot.is_boolean_string

    if isinstance(candidate, BuiltinType):
        return candidate.kind not in _NEVER_SCALAR

    if ctx.is_date_like(candidate):
        if kind in (ValueKind.BOOLEAN, ValueKind.FLOAT):
            return False
        return kind is not ValueKind.STRING or ctx.is_date_string(snapshot.value)

    if ctx.registry.is_generic_object(candidate):
        return False

    # Unknown classes can't be ruled out from a scalar alone
    return True


def _possible_for_list(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    # An explicit plain array expectation suppresses subtype narrowing
    no_subtypes = ARRAY in candidates

    possible = tuple(
        c
        for c in candidates
        if c == ARRAY
        or (not no_subtypes and isinstance(c, ArrayOf))
        or (isinstance(c, NamedType) and ctx.registry.accepts_traversable(c))
    )

    if no_subtypes:
        return possible

    return _remove_impossible_subtypes(possible, element_types(candidates), snapshot, ctx)


def _remove_impossible_subtypes(
    candidates: Candidates,
    subtypes: Candidates,
    snapshot: ValueSnapshot,
    ctx: GuessContext,
) -> Candidates:
    """Drop the array types whose element type doesn't fit every item."""
    if not subtypes:
        return candidates

    surviving = set(subtypes)
    for item in snapshot.items:
        surviving &= set(possible_types(subtypes, classify(item), ctx))

    if len(surviving) == len(subtypes):
        return candidates

    return tuple(c for c in candidates if not isinstance(c, ArrayOf) or c.element in surviving)


def _is_possible_for_object(
    candidate: TypeDescriptor, snapshot: ValueSnapshot, ctx: GuessContext
) -> bool:
    if isinstance(candidate, NamedType):
        return ctx.registry.is_instance(snapshot.value, candidate)
    if candidate == STRING:
        return snapshot.has_string_form
    if candidate in (OBJECT, ARRAY, ASSOC):
        return snapshot.is_anonymous
    return False


# === Stage: reduce-scalar-preferences ===


def reduce_scalar_preferences(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    """Pick between string, integer, float, boolean and date for a scalar.

    Removal rules are cumulative and applied in order:

    1. a date type beats string;
    2. integer beats dates;
    3. for a real boolean, boolean beats numbers and string; otherwise
       numbers beat boolean and string; otherwise string beats boolean;
    4. between integer and float, the value decides.
    """
    if len(candidates) < 2 or not snapshot.is_scalar:
        return candidates

    types = tuple(c for c in candidates if c in _SCALAR_TYPES or ctx.is_date_like(c))

    if len(types) < 2:
        return types

    dates = [c for c in types if ctx.is_date_like(c)]
    remove: list[TypeDescriptor] = []

    if dates:
        remove.append(STRING)

    if INTEGER in types:
        remove.extend(dates)

    if BOOLEAN in types and snapshot.kind is ValueKind.BOOLEAN:
        remove.extend([INTEGER, FLOAT, STRING])
    elif INTEGER in types or FLOAT in types:
        remove.extend([BOOLEAN, STRING])
    elif BOOLEAN in types and STRING in types:
        remove.append(BOOLEAN)

    if INTEGER in types and FLOAT in types:
        if snapshot.is_float_like:
            remove.append(INTEGER)
        elif snapshot.is_integer_like:
            remove.append(FLOAT)

    return _without(types, remove)


# === Stage: reduce-array-preferences ===


def reduce_array_preferences(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    """Pick between array types, mirroring the scalar preferences."""
    if len(candidates) == 1 or not snapshot.is_iterable or ARRAY in candidates:
        return candidates

    date_arrays = [c for c in candidates if ctx.is_date_like_array(c)]
    remove: list[TypeDescriptor] = []

    if date_arrays or BOOLEAN_ARRAY in candidates:
        remove.append(STRING_ARRAY)

    if INTEGER_ARRAY in candidates:
        remove.extend(date_arrays)

    if INTEGER_ARRAY in candidates or FLOAT_ARRAY in candidates:
        remove.extend([BOOLEAN_ARRAY, STRING_ARRAY])

    if INTEGER_ARRAY in candidates and FLOAT_ARRAY in candidates:
        has_float = any(classify(item).is_float_like for item in snapshot.items)
        remove.append(INTEGER_ARRAY if has_float else FLOAT_ARRAY)

    return _without(candidates, remove)


# === Stage: prefer-array-for-scalar ===


def prefer_array_for_scalar(
    candidates: Candidates, snapshot: ValueSnapshot, ctx: GuessContext
) -> Candidates:
    """Consider wrapping a scalar or a class instance in a single element array.

    Anonymous structures are left alone, they already have array shape.
    """
    wrappable = snapshot.is_scalar or (
        snapshot.kind in (ValueKind.OBJECT, ValueKind.DATE) and not snapshot.is_anonymous
    )
    if len(candidates) < 2 or not wrappable:
        return candidates

    if ARRAY in candidates:
        return tuple(c for c in candidates if not isinstance(c, ArrayOf))

    subtypes = element_types(candidates)
    if len(subtypes) != len(candidates):
        return candidates

    guessed = ctx.guess(snapshot.value, subtypes)
    return (ArrayOf(guessed),) if guessed is not None else candidates


# === Conclusion ===


def conclude(candidates: Candidates, ctx: GuessContext) -> TypeDescriptor | None:
    """Get the type if there is only one option left.

    Two options are kept as a union when one is a traversable class and the
    other an array type, e.g. ``ArrayObject|string[]``.
    """
    if len(candidates) < 2:
        return candidates[0] if candidates else None

    if len(candidates) != 2:
        return None

    first, second = candidates
    first_traversable = _is_traversable(first, ctx)
    if first_traversable == _is_traversable(second, ctx):
        return None

    traversable, other = (first, second) if first_traversable else (second, first)
    if not isinstance(traversable, NamedType) or not isinstance(other, ArrayOf):
        return None

    return UnionType(traversable, other.element)


def _is_traversable(descriptor: TypeDescriptor, ctx: GuessContext) -> bool:
    return isinstance(descriptor, NamedType) and ctx.registry.is_traversable(descriptor)


Stage = Callable[[Candidates, ValueSnapshot, GuessContext], Candidates]

STAGES: tuple[tuple[str, Stage], ...] = (
    ("restrict_to_possible", restrict_to_possible),
    ("reduce_scalar_preferences", reduce_scalar_preferences),
    ("reduce_array_preferences", reduce_array_preferences),
    ("prefer_array_for_scalar", prefer_array_for_scalar),
)
