"""Shared CLI utilities and constants."""

from __future__ import annotations

import json
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console

from valuecast.core.config import get_settings
from valuecast.core.logging import configure_logging

# Load .env file from current directory (VALUECAST_* settings)
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer arguments and options
ValueArg = Annotated[
    str,
    typer.Argument(help="Value to inspect (a raw string unless --parse-json is given)"),
]

ParseJsonFlag = Annotated[
    bool,
    typer.Option(
        "--parse-json",
        help="Read VALUE as JSON (lists, objects, numbers, true/false, null)",
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=configured level (WARNING by default), 1=INFO, 2+=DEBUG
    """
    settings = get_settings()

    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    configure_logging(
        log_level=level,
        log_format=settings.log_format,
        show_timestamps=verbosity >= 1,
        color=settings.log_format == "console",
        stdlib=True,
    )


def parse_value(raw: str, parse_json: bool) -> Any:
    """Get the value a command works on.

    Raises:
        typer.BadParameter: If --parse-json is given and VALUE isn't valid JSON
    """
    if not parse_json:
        return raw

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"not valid JSON: {e.msg}", param_hint="VALUE") from e


def print_json(data: Any) -> None:
    """Print data as JSON; values JSON can't represent are printed as strings."""
    console.print(json.dumps(data, default=str), markup=False, highlight=False, soft_wrap=True)
