"""CLI command implementations."""

from valuecast.cli.commands import cast, guess

__all__ = [
    "cast",
    "guess",
]
