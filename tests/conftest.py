"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import tomlkit


def write_package(root: Path, dirname: str, name: str, deps: list[str]) -> None:
    package_dir = root / "packages" / dirname
    package_dir.mkdir(parents=True)
    doc = tomlkit.document()
    project = tomlkit.table()
    project["name"] = name
    project["version"] = "1.0.0"
    project["dependencies"] = deps
    doc["project"] = project
    (package_dir / "pyproject.toml").write_text(tomlkit.dumps(doc))


@pytest.fixture
def make_workspace(tmp_path: Path) -> Callable[..., Path]:
    """Build a uv workspace under tmp_path.

    Takes a map of directory name → list of dependency strings; the
    package name equals the directory name.
    """

    def _make(packages: dict[str, list[str]], root_extra: str = "") -> Path:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "root"\nversion = "0.0.0"\n'
            'requires-python = ">=3.0"\n\n'
            '[tool.uv.workspace]\nmembers = ["packages/*"]\n' + root_extra
        )
        for dirname, deps in packages.items():
            write_package(tmp_path, dirname, dirname, deps)
        return tmp_path

    return _make


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
version = "2.0.0"
requires-python = ">=3.10,<4"
dependencies = ["click>=8.0", "acme-core>=1.0"]

[project.optional-dependencies]
dev = ["pytest>=8.0", "acme-testing"]

[dependency-groups]
test = ["hypothesis>=6.0", {include-group = "lint"}]
lint = ["ruff"]

[tool.uv.workspace]
members = ["packages/*", "libs/*"]

[tool.mono-dev]
prefix = "acme"
"""
    return tomlkit.parse(content)
