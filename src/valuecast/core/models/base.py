"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to a specific
module (guessing, casting, cli).
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures (a value that can't
    be cast). Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T | None:
        """Get the value or raise if failed.

        A successful cast of None is None, so the value may legitimately be None.
        """
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        return self.value


# === Enums ===


class TypeKind(str, Enum):
    """Builtin type names understood by the guesser and the cast handlers."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    ASSOC = "assoc"  # Associative array (mapping with string keys)
    OBJECT = "object"  # Anonymous structure (SimpleNamespace)
    RESOURCE = "resource"  # File handles, sockets, memory maps
    NULL = "null"
    MIXED = "mixed"  # Cast only: keep the value as is


class ValueKind(str, Enum):
    """Shape of a runtime value, as seen by the guesser."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"  # Sequential, list-like iterable
    ASSOC = "assoc"  # Mapping with at least one string key
    DATE = "date"  # datetime.date / datetime.datetime
    OBJECT = "object"
    RESOURCE = "resource"
    NULL = "null"

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_KINDS


_SCALAR_KINDS = frozenset({ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.STRING})
