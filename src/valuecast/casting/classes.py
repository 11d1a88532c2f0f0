"""Cast to a named class."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from valuecast.casting.base import Handler
from valuecast.core.models.base import Result, ValueKind
from valuecast.guessing.registry import TypeRegistry, default_registry
from valuecast.guessing.types import NamedType, TypeDescriptor
from valuecast.guessing.values import ValueSnapshot, classify


class ClassHandler(Handler):
    """Cast a value to an instance of a named class.

    The class is looked up in the registry. How the instance is created
    depends on the class:
    - date and datetime parse ISO strings and POSIX timestamps
    - pydantic models validate a mapping or an anonymous structure
    - other classes get the mapping as keyword arguments, or the value as
      the single positional argument
    """

    def __init__(self, registry: TypeRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()
        self.named: NamedType | None = None

    @property
    def type_name(self) -> str:
        return str(self.named) if self.named is not None else "object"

    def for_type(self, descriptor: TypeDescriptor) -> Handler:
        if not isinstance(descriptor, NamedType):
            raise ValueError(f"Unable to use ClassHandler for type '{descriptor}'")
        if descriptor == self.named:
            return self
        return self._copy(named=descriptor)

    def cast(self, value: Any) -> Result[Any]:
        snapshot = classify(value)

        if snapshot.kind is ValueKind.NULL:
            return Result.ok(None)
        if self.named is None:
            raise RuntimeError("ClassHandler has no type, use for_type() first")

        cls = self.registry.resolve(self.named)
        if cls is None:
            return self.dont_cast(value, f"class {self.named} not found")
        if isinstance(value, cls):
            return Result.ok(value)
        if snapshot.kind is ValueKind.RESOURCE:
            return self.dont_cast(value)

        if issubclass(cls, date):
            return self._to_date(cls, snapshot)
        if issubclass(cls, BaseModel):
            return self._to_model(cls, snapshot)

        try:
            if snapshot.is_associative:
                return Result.ok(cls(**{str(k): v for k, v in value.items()}))
            if snapshot.is_anonymous:
                return Result.ok(cls(**vars(value)))
            return Result.ok(cls(value))
        except (TypeError, ValueError) as e:
            return self.dont_cast(value, str(e))

    def _to_date(self, cls: type[date], snapshot: ValueSnapshot) -> Result[Any]:
        value = snapshot.value

        try:
            if snapshot.kind is ValueKind.STRING:
                return Result.ok(cls.fromisoformat(value.strip()))
            if snapshot.kind in (ValueKind.INTEGER, ValueKind.FLOAT):
                if issubclass(cls, datetime):
                    return Result.ok(cls.fromtimestamp(value, tz=UTC))
                return Result.ok(cls.fromtimestamp(value))
            # A plain date to datetime: midnight of that day
            if snapshot.kind is ValueKind.DATE:
                return Result.ok(cls(value.year, value.month, value.day))
        except (ValueError, OverflowError, OSError) as e:
            return self.dont_cast(value, str(e))

        return self.dont_cast(value)

    def _to_model(self, cls: type[BaseModel], snapshot: ValueSnapshot) -> Result[Any]:
        value = snapshot.value

        if isinstance(value, Mapping):
            data: Any = dict(value)
        elif snapshot.is_anonymous:
            data = vars(value)
        else:
            return self.dont_cast(value)

        try:
            return Result.ok(cls.model_validate(data))
        except ValidationError as e:
            return self.dont_cast(value, f"{e.error_count()} validation error(s)")
