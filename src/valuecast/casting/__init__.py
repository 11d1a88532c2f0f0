"""Cast handlers.

One handler per family of target types. Handlers are usually obtained from
``TypeCast.get_handler`` rather than created directly.

Usage:
    from valuecast.casting import NumberHandler
    from valuecast.guessing.types import INTEGER

    NumberHandler().for_type(INTEGER).cast("42")  # Result.ok(42)
"""

from valuecast.casting.array import ArrayHandler
from valuecast.casting.base import Handler, unable_to_cast
from valuecast.casting.boolean import BooleanHandler
from valuecast.casting.classes import ClassHandler
from valuecast.casting.mixed import MixedHandler
from valuecast.casting.multiple import MultipleHandler
from valuecast.casting.number import NumberHandler
from valuecast.casting.object import ObjectHandler
from valuecast.casting.resource import ResourceHandler
from valuecast.casting.string import StringHandler

__all__ = [
    # Base
    "Handler",
    "unable_to_cast",
    # Scalars
    "StringHandler",
    "NumberHandler",
    "BooleanHandler",
    # Structures
    "ArrayHandler",
    "ObjectHandler",
    "ClassHandler",
    # Other
    "ResourceHandler",
    "MixedHandler",
    "MultipleHandler",
]
