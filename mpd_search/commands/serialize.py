"""Build a filter expression from crumbs and pending input."""

from __future__ import annotations

import click

from mpd_search.commands import Context, pass_context
from mpd_search.expression import Clause, serialize
from mpd_search.utils.output import verbose

EXIT_SUCCESS = 0


@click.command("serialize")
@click.argument("value", required=False, default="")
@click.option(
    "--crumb",
    "crumbs",
    nargs=3,
    multiple=True,
    metavar="TAG OP VALUE",
    help="Committed clause, repeat for several (values are unescaped)",
)
@click.option(
    "--tag",
    "-t",
    default=None,
    help="Tag of the pending clause (default: search.default_tag)",
)
@click.option(
    "--operator",
    "-o",
    default=None,
    help="Operator of the pending clause (default: search.default_operator)",
)
@pass_context
def cli(
    ctx: Context,
    value: str,
    crumbs: tuple[tuple[str, str, str], ...],
    tag: str | None,
    operator: str | None,
) -> None:
    """Print the MPD filter expression for CRUMBs plus a pending VALUE.

    VALUE is the text being typed into the search box. It is combined with
    --tag and --operator into the last clause. Without VALUE, only the
    crumbs are used. Server capabilities and the view are group options.

    \b
    Examples:
      mpd-search serialize --tag Artist --operator == Muse
      mpd-search serialize --crumb Artist == Muse --tag Genre Rock
      mpd-search --no-starts-with serialize -t Title -o starts_with Da
    """
    clauses = [Clause(tag=t, operator=op, value=v) for t, op, v in crumbs]

    expression = serialize(
        clauses,
        tag if tag is not None else ctx.config.default_tag,
        operator if operator is not None else ctx.config.default_operator,
        value,
        features=ctx.features,
        view=ctx.view,
    )

    if not expression:
        verbose("No clauses given, expression is empty")
    click.echo(expression)
    raise SystemExit(EXIT_SUCCESS)
