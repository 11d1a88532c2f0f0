"""Type guessing.

This module decides which of a set of declared types a runtime value most
plausibly represents:
- Value classification (one snapshot per value)
- Candidate narrowing in ordered stages
- Conclusion to a single type, an array/traversable union, or no decision

Key principle: the guesser only decides *which* type. Converting the value
is the job of the cast handlers in ``valuecast.casting``.

Usage:
    from valuecast.guessing import TypeGuesser

    guesser = TypeGuesser()
    guesser.guess_for("100", ["integer", "float", "boolean", "string"])  # integer
    guesser.guess_for([1.0, 2.5], ["integer[]", "float[]"])  # float[]
"""

from valuecast.guessing.guesser import TypeGuesser
from valuecast.guessing.patterns import DatePatternMatcher, PatternConfig, load_pattern_config
from valuecast.guessing.registry import TypeRegistry, default_registry
from valuecast.guessing.types import (
    ArrayOf,
    BuiltinType,
    NamedType,
    TypeDescriptor,
    UnionType,
    candidate_set,
    parse_type,
)
from valuecast.guessing.values import BOOLEAN_STRINGS, ValueSnapshot, classify

__all__ = [
    # Guesser
    "TypeGuesser",
    # Type descriptors
    "TypeDescriptor",
    "BuiltinType",
    "NamedType",
    "ArrayOf",
    "UnionType",
    "parse_type",
    "candidate_set",
    # Values
    "ValueSnapshot",
    "classify",
    "BOOLEAN_STRINGS",
    # Collaborators
    "TypeRegistry",
    "default_registry",
    "DatePatternMatcher",
    "PatternConfig",
    "load_pattern_config",
]
