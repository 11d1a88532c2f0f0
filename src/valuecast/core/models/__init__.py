"""Shared models."""

from valuecast.core.models.base import Result, TypeKind, ValueKind

__all__ = [
    "Result",
    "TypeKind",
    "ValueKind",
]
