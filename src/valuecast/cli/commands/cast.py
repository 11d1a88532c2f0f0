"""Cast command - convert a value to a type."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

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

TypeArg = Annotated[
    str,
    typer.Argument(help="Target type, e.g. integer, float[], datetime, integer|float"),
]


def cast(
    value: ValueArg,
    type_name: TypeArg,
    parse_json: ParseJsonFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Cast a value to a type.

    Exits with code 1 when the value can't be cast.

    Examples:

        valuecast cast 42 float

        valuecast cast '["1", "2"]' 'int[]' --parse-json

        valuecast cast 10.5 'integer|float' --json
    """
    setup_logging(verbose)
    data = parse_value(value, parse_json)
    typecast = get_typecast()

    with log_context(command="cast", target=type_name):
        try:
            result = typecast.try_to(data, type_name)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="TYPE") from e

    if json_output:
        print_json(
            {
                "value": data,
                "type": type_name,
                "success": result.success,
                "result": result.value,
                "error": result.error,
            }
        )
    elif result.success:
        console.print(repr(result.value), markup=False, highlight=False)
    else:
        console.print(f"[red]{escape(result.error or '')}[/red]")

    if not result.success:
        raise typer.Exit(1)
