"""Command-line interface for mpd-search."""

from __future__ import annotations

import os
from pathlib import Path

import click

from mpd_search import __version__
from mpd_search.commands import Context, init_config, parse, serialize
from mpd_search.config import load_config
from mpd_search.exceptions import ConfigError
from mpd_search.utils.output import error, set_color, set_verbosity, warning


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config file (default: ~/.config/mpd-search/config.toml)",
)
@click.option(
    "--starts-with/--no-starts-with",
    default=None,
    help="Whether the server supports starts_with (default: features.starts_with)",
)
@click.option(
    "--pcre/--no-pcre",
    default=None,
    help="Whether the server supports =~ regex matching (default: features.pcre)",
)
@click.option(
    "--view",
    default=None,
    help="Browsing context, e.g. BrowseDatabaseList (default: search.view)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Log parser and serializer decisions")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.version_option(version=__version__, prog_name="mpd-search")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    starts_with: bool | None,
    pcre: bool | None,
    view: str | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """mpd-search: Build and parse MPD search filter expressions.

    Converts between search crumbs (tag, operator, value) and the
    parenthesized filter expressions understood by MPD. The server's
    capabilities decide how starts_with is written; they come from the
    [features] section of the config unless given here.

    \b
    Examples:
      mpd-search serialize --crumb Artist == Muse --tag Genre Rock
      mpd-search --no-starts-with serialize -t Title -o starts_with Da
      mpd-search parse "(Artist == 'Muse' AND Genre contains 'Rock')"
    """
    set_verbosity(verbose=verbose, debug=debug)
    if no_color or os.environ.get("NO_COLOR") is not None:
        set_color(False)

    try:
        config, warnings = load_config(config_path)
    except ConfigError as e:
        error(str(e), hint="Fix the file or recreate it with: mpd-search init-config --force")
        ctx.exit(1)
        return

    if not config.colored_output:
        set_color(False)
    if not quiet:
        for message in warnings:
            warning(message)

    app_ctx = ctx.ensure_object(Context)
    app_ctx.config_path = config_path
    app_ctx.quiet = quiet
    app_ctx.apply(config, starts_with=starts_with, pcre=pcre, view=view)


for _module in (serialize, parse, init_config):
    cli.add_command(_module.cli)
