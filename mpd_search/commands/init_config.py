"""Write a config file describing the MPD server's search capabilities."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from mpd_search.commands import Context, pass_context
from mpd_search.config import get_default_config_path, save_config
from mpd_search.utils.fileops import secure_mkdir
from mpd_search.utils.output import error, info, success, warning


@click.command("init-config")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write (default: --config, else ~/.config/mpd-search/config.toml)",
)
@click.option("--default-tag", default=None, help="Tag preselected for new clauses")
@click.option("--default-operator", default=None, help="Operator preselected for new clauses")
@pass_context
def cli(
    ctx: Context,
    force: bool,
    output: Path | None,
    default_tag: str | None,
    default_operator: str | None,
) -> None:
    """Create a config file with the current search settings.

    The [features] and view written come from the group options, so the
    file can be generated for a server that lacks starts_with or regex
    support.

    \b
    Examples:
      mpd-search init-config
      mpd-search --no-starts-with --pcre init-config --force
      mpd-search -c ./mpd-search.toml init-config --default-tag Artist
    """
    config_path = output or ctx.config_path or get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(f"Config file already exists: {config_path}", hint="Use --force to overwrite")
        raise SystemExit(1)

    config = ctx.effective_config()
    if default_tag is not None:
        config = dataclasses.replace(config, default_tag=default_tag)
    if default_operator is not None:
        config = dataclasses.replace(config, default_operator=default_operator)
    for message in config.validate():
        warning(message)

    try:
        secure_mkdir(config_path.parent)
        save_config(config, config_path, include_defaults=True)
        config_path.chmod(0o600)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1) from e

    success(f"Created config file: {config_path}")
    info(
        f"starts_with={config.starts_with}, pcre={config.pcre}, "
        f"view={config.view or '(none)'}"
    )
