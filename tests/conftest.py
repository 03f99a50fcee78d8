"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

    from mpd_search.config import Config


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file for a server without starts_with."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[features]
starts_with = false
pcre = true

[search]
default_tag = "Title"
default_operator = "starts_with"
debounce_ms = 250

[display]
colored_output = false
""")
    return config_path


@pytest.fixture
def mock_config() -> Config:
    """Create a Config object for testing."""
    from mpd_search.config import Config

    return Config(
        starts_with=False,
        pcre=False,
        default_tag="Artist",
        default_operator="==",
        colored_output=False,
    )
