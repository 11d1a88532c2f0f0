"""Shared pytest fixtures for all tests."""

from collections import UserList

import pytest

from valuecast.core.config import Settings
from valuecast.guessing import TypeGuesser, TypeRegistry, default_registry
from valuecast.typecast import TypeCast


class ArrayObject(UserList):
    """A concrete traversable class, wrapping a list."""


class Money:
    """A plain class constructed from a single value."""

    def __init__(self, amount):
        self.amount = float(amount)

    def __eq__(self, other):
        return isinstance(other, Money) and other.amount == self.amount


class Point:
    """A plain class constructed from keyword arguments."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


@pytest.fixture
def registry() -> TypeRegistry:
    """Default registry with the test classes registered."""
    return default_registry().register(ArrayObject).register(Money).register(Point)


@pytest.fixture
def guesser(registry: TypeRegistry) -> TypeGuesser:
    """Guesser using the bundled date patterns."""
    return TypeGuesser(registry=registry)


@pytest.fixture
def settings() -> Settings:
    """Settings with the default aliases, independent of the environment."""
    return Settings(type_aliases={"bool": "boolean", "int": "integer"})


@pytest.fixture
def typecast(registry: TypeRegistry, settings: Settings) -> TypeCast:
    """TypeCast wired to the test registry."""
    return TypeCast(registry=registry, settings=settings)
