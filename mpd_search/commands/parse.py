"""Show the crumbs contained in a filter expression."""

from __future__ import annotations

import dataclasses
import json

import click
from rich.text import Text

from mpd_search.commands import Context, pass_context
from mpd_search.expression import Clause, parse
from mpd_search.utils.output import console, create_table, info

EXIT_SUCCESS = 0


@click.command("parse")
@click.argument("expression")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "labels", "json"]),
    default="table",
    help="Output format (default: table)",
)
@pass_context
def cli(ctx: Context, expression: str, output_format: str) -> None:
    """Parse EXPRESSION and print its clauses.

    Clauses the parser does not understand, such as numeric comparisons
    with an unquoted value, are left out.

    \b
    Output formats:
      --format table    Rich table (default)
      --format labels   One crumb label per line
      --format json     JSON array of {tag, operator, value} objects
    """
    clauses = parse(expression)

    if output_format == "json":
        click.echo(json.dumps([dataclasses.asdict(c) for c in clauses], indent=2))
        raise SystemExit(EXIT_SUCCESS)

    if not clauses:
        if not ctx.quiet:
            info(f"No clauses in: {expression}")
        raise SystemExit(EXIT_SUCCESS)

    if output_format == "labels":
        for clause in clauses:
            click.echo(clause.label)
    else:
        _print_table(clauses)

    raise SystemExit(EXIT_SUCCESS)


def _print_table(clauses: list[Clause]) -> None:
    """Print clauses as a Rich table."""
    table = create_table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Tag", style="crumb.tag")
    table.add_column("Operator", style="crumb.operator")
    table.add_column("Value", style="crumb.value")

    for i, clause in enumerate(clauses, start=1):
        table.add_row(str(i), Text(clause.tag), Text(clause.operator), Text(clause.value))

    console.print(table)
