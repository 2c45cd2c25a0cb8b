"""Workspace discovery: find packages and their build order.

Reads [tool.uv.workspace].members from the root pyproject.toml, loads every
member manifest, and feeds the internal dependencies into the graph sorter.
"""

from __future__ import annotations

import glob
from collections.abc import Mapping
from pathlib import Path

import tomlkit

from .deps import internal_deps
from .graph import DependencyLookup, topo_sort
from .models import PackageInfo
from .shell import fatal, step
from .toml import (
    get_namespace_prefix,
    get_project_name,
    get_project_version,
    get_workspace_member_globs,
    load_pyproject,
)


def discover_packages(
    root: Path | None = None, prefix: str | None = None
) -> dict[str, PackageInfo]:
    """Scan the workspace and discover all packages.

    Args:
        root: Workspace root, defaults to the current directory.
        prefix: Namespace prefix internal deps must carry. Defaults to
                [tool.mono-dev].prefix from the root pyproject.toml.

    Returns:
        Map of package name to PackageInfo, in member glob order.
    """
    step("Discovering workspace packages")

    root = root or Path.cwd()
    root_doc = load_pyproject(root / "pyproject.toml")
    member_globs = get_workspace_member_globs(root_doc)
    if prefix is None:
        prefix = get_namespace_prefix(root_doc)

    # Expand globs to find all package directories
    member_dirs: list[Path] = []
    for pattern in member_globs:
        for match in sorted(glob.glob(str(root / pattern))):
            p = Path(match)
            if (p / "pyproject.toml").exists() and p not in member_dirs:
                member_dirs.append(p)

    if not member_dirs:
        fatal("No packages found matching workspace members")

    # First pass: names are needed before deps can be classified
    packages: dict[str, PackageInfo] = {}
    docs: dict[str, tomlkit.TOMLDocument] = {}
    for d in member_dirs:
        doc = load_pyproject(d / "pyproject.toml")
        name = get_project_name(doc, d.name)
        packages[name] = PackageInfo(
            path=d.relative_to(root).as_posix(),
            version=get_project_version(doc),
        )
        docs[name] = doc

    workspace_names = set(packages)
    for name, doc in docs.items():
        packages[name].deps = [
            dep for dep in internal_deps(doc, workspace_names, prefix) if dep != name
        ]

    return packages


def dependency_lookup(packages: Mapping[str, PackageInfo]) -> DependencyLookup:
    """Adapt a package map to the lookup callable used by topo_sort.

    Unknown names raise KeyError.
    """

    def lookup(name: str) -> list[str]:
        return packages[name].deps

    return lookup


def build_order(packages: Mapping[str, PackageInfo]) -> list[str]:
    """Return package names in build order (dependencies first)."""
    if not packages:
        return []
    return topo_sort(list(packages), dependency_lookup(packages))
