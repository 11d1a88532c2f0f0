"""Guess command - pick the type a value most plausibly is."""

from __future__ import annotations

from typing import Annotated

import typer

from valuecast.cli.common import (
    JsonFlag,
    ParseJsonFlag,
    ValueArg,
    VerboseOption,
    console,
    parse_value,
    print_json,
    setup_logging,
)
from valuecast.core.logging import log_context
from valuecast.typecast import get_typecast

TypesOption = Annotated[
    list[str],
    typer.Option(
        "--type",
        "-t",
        help="Candidate type (repeat for each type)",
    ),
]


def guess(
    value: ValueArg,
    types: TypesOption,
    parse_json: ParseJsonFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Guess which of the candidate types a value is.

    Exits with code 1 when no single type can be picked.

    Examples:

        valuecast guess 10.44 -t integer -t float -t string

        valuecast guess '[1, 2.5]' -t 'integer[]' -t 'float[]' --parse-json

        valuecast guess yes -t boolean -t string --json
    """
    setup_logging(verbose)
    data = parse_value(value, parse_json)
    typecast = get_typecast()

    with log_context(command="guess"):
        try:
            candidates = [typecast.normalize_type(t) for t in types]
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--type") from e
        result = typecast.guesser.guess_type(data, candidates)

    if json_output:
        print_json({"value": data, "types": types, "type": result})
    elif result is not None:
        console.print(result, markup=False, highlight=False)
    else:
        console.print("[yellow]no decision[/yellow]")

    if result is None:
        raise typer.Exit(1)
