"""valuecast - guess and cast loosely typed values.

Usage:
    import valuecast

    valuecast.guess_type("10.44", ["integer", "float", "string"])  # 'float'
    valuecast.cast("10.44", "float")  # 10.44
    valuecast.cast(["1", "2"], "int[]")  # [1, 2]
"""

from typing import Any

from valuecast.core.models.base import Result
from valuecast.guessing import TypeGuesser, TypeRegistry, default_registry
from valuecast.typecast import TypeCast, get_typecast

__version__ = "0.1.0"


def cast(value: Any, type_name: str) -> Any:
    """Cast a value with the shared TypeCast; returns the value unchanged on failure."""
    return get_typecast().to(value, type_name)


def guess_type(value: Any, types: list[str]) -> str | None:
    """Guess which of the types the value is, or None if undecided."""
    return get_typecast().guesser.guess_type(value, types)


__all__ = [
    "__version__",
    # Helpers
    "cast",
    "guess_type",
    # Classes
    "TypeCast",
    "TypeGuesser",
    "TypeRegistry",
    "Result",
    "default_registry",
    "get_typecast",
]
