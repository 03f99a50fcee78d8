"""Subcommands and the search context they share."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import click

from mpd_search.config import Config
from mpd_search.expression.clause import Features

logger = logging.getLogger(__name__)


class Context:
    """Search settings resolved once by the command group.

    ``features`` and ``view`` start from the loaded config and carry any
    capability flags given on the command line, so every command builds
    and reads expressions against the same backend.
    """

    def __init__(self) -> None:
        self.config = Config()
        self.config_path: Path | None = None
        self.features: Features = self.config.features
        self.view: str | None = None
        self.quiet = False

    def apply(
        self,
        config: Config,
        *,
        starts_with: bool | None = None,
        pcre: bool | None = None,
        view: str | None = None,
    ) -> None:
        """Use *config*, overridden by the flags that were given."""
        overrides = {
            name: flag
            for name, flag in (("starts_with", starts_with), ("pcre", pcre))
            if flag is not None
        }
        self.config = config
        self.features = dataclasses.replace(config.features, **overrides)
        self.view = (config.view if view is None else view) or None
        logger.debug("Backend features %s, view %r", self.features, self.view)

    def effective_config(self) -> Config:
        """The loaded config with the command-line overrides folded in."""
        return dataclasses.replace(
            self.config,
            starts_with=self.features.starts_with,
            pcre=self.features.pcre,
            view=self.view or "",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)
