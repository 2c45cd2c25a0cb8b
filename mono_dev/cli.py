"""CLI entry point for mono-dev."""

from __future__ import annotations

import json
import os
from pathlib import Path

import click

from mono_dev.fs import clean_build, read_dir
from mono_dev.shell import exec_pm, log_bin
from mono_dev.toml import load_pyproject
from mono_dev.versions import check_engine
from mono_dev.workspace import build_order, discover_packages


def _root_pyproject() -> Path:
    pyproject = Path.cwd() / "pyproject.toml"
    if not pyproject.exists():
        raise click.ClickException("No pyproject.toml found in current directory.")
    return pyproject


@click.group()
@click.version_option(package_name="mono-dev")
def cli() -> None:
    """Developer scripts for a uv workspace monorepo."""


@cli.command()
@click.option(
    "--prefix",
    default=None,
    help="Only treat dependencies with this name prefix as internal.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the order as JSON.")
def order(prefix: str | None, as_json: bool) -> None:
    """Print workspace packages in build order (dependencies first)."""
    _root_pyproject()
    packages = discover_packages(prefix=prefix)
    names = build_order(packages)

    if as_json:
        click.echo(json.dumps(names))
        return

    for name in names:
        info = packages[name]
        deps = f" → [{', '.join(info.deps)}]" if info.deps else ""
        click.echo(f"  {name} {info.version} ({info.path}){deps}")


@cli.command("clean-build")
def clean_build_cmd() -> None:
    """Remove build, dist and tool cache directories."""
    log_bin("mono-dev-clean-build")
    root = Path.cwd()
    for path in clean_build(root):
        click.echo(f"  removed {path.relative_to(root)}")


@cli.command()
@click.option("--skip-ruff", is_flag=True, help="Skips running ruff.")
@click.option("--skip-mypy", is_flag=True, help="Skips running mypy.")
def lint(skip_ruff: bool, skip_mypy: bool) -> None:
    """Run ruff and mypy over the workspace."""
    if not read_dir(Path.cwd(), [".py", ".pyi"]):
        click.echo("  No Python sources found, nothing to lint")
        return

    root = str(Path.cwd())
    if not skip_ruff:
        # Never rewrite files on CI
        fix = [] if os.environ.get("GITHUB_REPOSITORY") else ["--fix"]
        exec_pm("run", "ruff", "check", *fix, root)

    if not skip_mypy:
        exec_pm("run", "mypy", "--pretty", root)


@cli.command("check-engine")
def check_engine_cmd() -> None:
    """Fail when Python is older than the root requires-python."""
    check_engine(load_pyproject(_root_pyproject()))
    click.echo("✓ Python version satisfies requires-python")
