"""Tests for parity between package imports and declared runtime dependencies."""

from __future__ import annotations

import re
import sys
import tomllib
from pathlib import Path

_IMPORT_RE = re.compile(r"^(?:from|import)\s+([A-Za-z_][A-Za-z0-9_]*)", re.MULTILINE)


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _requirement_name(requirement: str) -> str:
    match = re.match(r"[A-Za-z0-9_.-]+", requirement)
    assert match is not None
    return match.group(0).lower().replace("_", "-")


def test_pyproject_runtime_deps_cover_package_imports() -> None:
    """Every third-party import in mpd_search is a declared dependency."""
    repo_root = _repo_root()

    pyproject_data = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))
    dependency_names = {
        _requirement_name(requirement)
        for requirement in pyproject_data["project"]["dependencies"]
    }

    imported: set[str] = set()
    for source in (repo_root / "mpd_search").rglob("*.py"):
        imported.update(_IMPORT_RE.findall(source.read_text(encoding="utf-8")))

    third_party = {
        name
        for name in imported
        if name not in sys.stdlib_module_names and name not in ("mpd_search", "__future__")
    }
    assert third_party

    for module_name in sorted(third_party):
        assert module_name.lower().replace("_", "-") in dependency_names, (
            f"Module '{module_name}' is imported but missing from pyproject.toml dependencies."
        )
