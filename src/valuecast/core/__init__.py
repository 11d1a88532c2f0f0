"""Core module - configuration, logging, and shared models."""

from valuecast.core.config import Settings, get_settings
from valuecast.core.models.base import Result, TypeKind, ValueKind

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models - enums
    "TypeKind",
    "ValueKind",
    # Models - base data structures
    "Result",
]
