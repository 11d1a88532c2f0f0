"""Type guesser.

Given a value and the types a caller declared acceptable, narrow the types
down to the one the value most plausibly represents:

    guesser = TypeGuesser()
    guesser.guess_for("10.44", ["integer", "float", "boolean", "string"])  # float

Guessing is deterministic and has no side effects. A guess can fail, which
is a normal outcome: the caller decides what to do with an ambiguous value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from valuecast.core.logging import get_logger
from valuecast.guessing.patterns import DatePatternMatcher
from valuecast.guessing.registry import TypeRegistry, default_registry
from valuecast.guessing.stages import STAGES, GuessContext, conclude, remove_null
from valuecast.guessing.types import TypeDescriptor, candidate_set
from valuecast.guessing.values import classify

logger = get_logger(__name__)


class TypeGuesser:
    """Guess the type of a value from a set of candidate types."""

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        is_date_string: Callable[[str], bool] | None = None,
        aliases: Mapping[str, str] | None = None,
    ):
        """Initialize the guesser.

        Args:
            registry: Class lookup for named types (defaults to the standard registry)
            is_date_string: Date-string predicate (defaults to the configured date patterns)
            aliases: Type name aliases applied when parsing type names
        """
        self.registry = registry if registry is not None else default_registry()
        self.is_date_string = is_date_string if is_date_string is not None else DatePatternMatcher()
        self.aliases = dict(aliases or {})
        self._ctx = GuessContext(
            registry=self.registry,
            is_date_string=self.is_date_string,
            guess=self.guess_for,
        )

    def guess_for(
        self, value: Any, types: Iterable[str | TypeDescriptor]
    ) -> TypeDescriptor | None:
        """Guess the type for the value.

        Args:
            value: The value to inspect
            types: Candidate types, as names or descriptors

        Returns:
            The guessed type, or None if no single type can be picked

        Raises:
            ValueError: If a type name is malformed
        """
        snapshot = classify(value)
        candidates = remove_null(candidate_set(types, self.aliases), snapshot, self._ctx)

        # A single declared type is never second-guessed
        if len(candidates) < 2:
            return candidates[0] if candidates else None

        for name, stage in STAGES:
            narrowed = stage(candidates, snapshot, self._ctx)
            if narrowed and narrowed != candidates:
                logger.debug(
                    "guess_stage",
                    stage=name,
                    before=[str(c) for c in candidates],
                    after=[str(c) for c in narrowed],
                )
                candidates = narrowed

        result = conclude(candidates, self._ctx)
        logger.debug(
            "guess_concluded",
            value_kind=snapshot.kind.value,
            candidates=[str(c) for c in candidates],
            result=str(result) if result is not None else None,
        )
        return result

    def guess_type(self, value: Any, types: Iterable[str | TypeDescriptor]) -> str | None:
        """Guess the type for the value and return its name."""
        result = self.guess_for(value, types)
        return str(result) if result is not None else None
