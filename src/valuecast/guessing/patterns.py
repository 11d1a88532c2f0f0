"""Pattern detection for date/time strings.

This module decides whether a string can be read as a date or time, which
is what the guesser needs to keep or drop date-like candidates. Patterns are
defined in config/patterns/default.yaml.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, cast

import yaml

from valuecast.core.config import get_settings

PATTERN_CATEGORIES = (
    "date_patterns",
    "time_patterns",
    "relative_date_patterns",
)


@dataclass
class Pattern:
    """A single pattern definition for value matching."""

    name: str
    pattern: str
    category: str = "date_patterns"
    case_sensitive: bool = False
    examples: list[str] | None = None

    # Compiled regex (set in __post_init__)
    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile regex pattern."""
        flags = 0 if self.case_sensitive else re.IGNORECASE
        self._regex = re.compile(self.pattern, flags)

    def matches(self, value: str) -> bool:
        """Check if value matches this pattern.

        Args:
            value: String value to check

        Returns:
            True if pattern matches
        """
        if not value:
            return False
        return self._regex.match(value.strip()) is not None


class PatternConfig:
    """Pattern detection configuration.

    Loads patterns from YAML configuration and provides matching functionality.
    """

    def __init__(self, config_dict: dict[str, object]):
        self._config = config_dict
        self._patterns: list[Pattern] = []
        self._load_patterns()

    def _load_patterns(self) -> None:
        """Load all patterns from configuration."""
        for category in PATTERN_CATEGORIES:
            patterns_list = cast(list[dict[str, Any]], self._config.get(category) or [])
            for pattern_dict in patterns_list:
                try:
                    pattern = Pattern(
                        name=pattern_dict["name"],
                        pattern=pattern_dict["pattern"],
                        category=category,
                        case_sensitive=pattern_dict.get("case_sensitive", False),
                        examples=pattern_dict.get("examples"),
                    )
                except KeyError:
                    # Skip invalid patterns
                    continue
                self._patterns.append(pattern)

    def get_patterns(self) -> list[Pattern]:
        """Get all patterns."""
        return self._patterns

    def match_value(self, value: str) -> list[Pattern]:
        """Find all patterns that match a value.

        Args:
            value: String value to match

        Returns:
            List of matching Pattern objects
        """
        return [pattern for pattern in self._patterns if pattern.matches(value)]


def load_pattern_config(config_path: Path | None = None) -> PatternConfig:
    """Load pattern configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        PatternConfig instance
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "patterns" / "default.yaml"

    with open(config_path) as f:
        config_dict = yaml.safe_load(f) or {}

    return PatternConfig(config_dict)


def _is_iso_format(value: str) -> bool:
    # Basic format ("20240115", "1030") is indistinguishable from a number
    if "-" not in value and ":" not in value:
        return False

    for parser in (datetime.fromisoformat, date.fromisoformat, time.fromisoformat):
        try:
            parser(value)
        except ValueError:
            continue
        return True
    return False


class DatePatternMatcher:
    """Date-string predicate.

    A string is a date when it is ISO 8601 or matches one of the configured
    patterns. Instances are callables, usable wherever the guesser expects a
    ``Callable[[str], bool]``.
    """

    def __init__(self, config: PatternConfig | None = None):
        self.config = config if config is not None else load_pattern_config()

    def __call__(self, value: str) -> bool:
        value = value.strip()
        if not value:
            return False
        if _is_iso_format(value):
            return True
        return any(pattern.matches(value) for pattern in self.config.get_patterns())
