"""Configuration management for mpd-search."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from mpd_search.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from mpd_search.expression.clause import KNOWN_OPERATORS, Features

DEFAULT_TAG = "any"
DEFAULT_OPERATOR = "contains"
DEFAULT_DEBOUNCE_MS = 500


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "mpd-search" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        starts_with: Backend supports the ``starts_with`` operator.
        pcre: Backend supports ``=~`` regex matching.
        default_tag: Tag preselected for new clauses.
        default_operator: Operator preselected for new clauses.
        debounce_ms: Delay before a keystroke triggers a search.
        view: Browsing context passed to the serializer. An empty string
            means no particular view.
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    starts_with: bool = True
    pcre: bool = True
    default_tag: str = DEFAULT_TAG
    default_operator: str = DEFAULT_OPERATOR
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    view: str = ""
    colored_output: bool = True
    config_path: Path | None = None

    @property
    def features(self) -> Features:
        """Backend capability flags."""
        return Features(starts_with=self.starts_with, pcre=self.pcre)

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.

        Raises:
            ConfigValidationError: If a critical validation fails.
        """
        warnings: list[str] = []

        if self.debounce_ms < 0:
            raise ConfigValidationError(
                "search.debounce_ms", self.debounce_ms, "must not be negative"
            )

        # Unknown operators still reach the backend, which may reject them
        if self.default_operator not in KNOWN_OPERATORS:
            warnings.append(
                f"search.default_operator='{self.default_operator}' is not a known "
                f"MPD operator"
            )

        if not self.default_tag:
            warnings.append("search.default_tag is empty")

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: mpd-search init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    # Load from file
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _get_bool(section: dict[str, Any], section_name: str, key: str) -> bool | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{section_name}.{key}", value, "must be a boolean")
    return value


def _get_str(section: dict[str, Any], section_name: str, key: str) -> str | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        raise ConfigValidationError(f"{section_name}.{key}", value, "must be a string")
    return value


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [features] section
    features = data.get("features", {})
    starts_with = _get_bool(features, "features", "starts_with")
    if starts_with is not None:
        config.starts_with = starts_with
    pcre = _get_bool(features, "features", "pcre")
    if pcre is not None:
        config.pcre = pcre

    # Parse [search] section
    search = data.get("search", {})
    default_tag = _get_str(search, "search", "default_tag")
    if default_tag is not None:
        config.default_tag = default_tag
    default_operator = _get_str(search, "search", "default_operator")
    if default_operator is not None:
        config.default_operator = default_operator
    view = _get_str(search, "search", "view")
    if view is not None:
        config.view = view

    if "debounce_ms" in search:
        value = search["debounce_ms"]
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("search.debounce_ms", value, "must be an integer")
        config.debounce_ms = value

    # Parse [display] section
    display = data.get("display", {})
    colored_output = _get_bool(display, "display", "colored_output")
    if colored_output is not None:
        config.colored_output = colored_output

    return config


def save_config(
    config: Config, config_path: Path | None = None, *, include_defaults: bool = False
) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
        include_defaults: Write every [search] key, not only the changed ones.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    # Ensure directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Build TOML structure
    data: dict[str, Any] = {
        "features": {
            "starts_with": config.starts_with,
            "pcre": config.pcre,
        },
        "display": {
            "colored_output": config.colored_output,
        },
    }

    search_data: dict[str, Any] = {
        "default_tag": config.default_tag,
        "default_operator": config.default_operator,
        "debounce_ms": config.debounce_ms,
        "view": config.view,
    }
    if not include_defaults:
        defaults = Config()
        search_data = {
            key: value for key, value in search_data.items() if value != getattr(defaults, key)
        }
    if search_data:
        data["search"] = search_data

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
