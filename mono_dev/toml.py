"""Manifest reading for the workspace root and its member packages.

Every value the tool needs (member globs, package names and versions,
declared dependencies, the interpreter floor and the internal namespace)
comes from a pyproject.toml parsed with tomlkit.
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from packaging.utils import canonicalize_name

from .shell import fatal


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    return tomlkit.parse(path.read_text())


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Package name as used for graph ids.

    The name is PEP 503 normalized so "My_Pkg" in one manifest and "my-pkg"
    in a dependency string of another resolve to the same id. ``fallback``
    (usually the directory name) goes through the same normalization.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def get_project_version(doc: tomlkit.TOMLDocument) -> str:
    """[project].version, or "0.0.0" for manifests that leave it dynamic."""
    return doc.get("project", {}).get("version", "0.0.0")


def get_requires_python(doc: tomlkit.TOMLDocument) -> str | None:
    value = doc.get("project", {}).get("requires-python")
    return str(value) if value is not None else None


def get_all_dependency_strings(doc: tomlkit.TOMLDocument) -> list[str]:
    """Every PEP 508 string a package declares, in file order.

    Runtime dependencies come first, then each extra, then each PEP 735
    group. A workspace package pulled in only by a test extra still
    constrains build order.
    """
    project = doc.get("project", {})
    deps: list[str] = list(project.get("dependencies", []))
    for extra in project.get("optional-dependencies", {}).values():
        deps.extend(extra)
    for group in doc.get("dependency-groups", {}).values():
        # {include-group = "..."} entries name another group, not a package
        deps.extend(d for d in group if isinstance(d, str))
    return deps


def get_workspace_member_globs(doc: tomlkit.TOMLDocument) -> list[str]:
    """Member patterns from the root [tool.uv.workspace] table.

    Exits with an error when the root is not a uv workspace.
    """
    members = doc.get("tool", {}).get("uv", {}).get("workspace", {}).get("members")
    if not members:
        fatal("No [tool.uv.workspace] members defined in root pyproject.toml")
    return list(members)


def get_namespace_prefix(doc: tomlkit.TOMLDocument) -> str | None:
    """Internal package prefix from [tool.mono-dev].prefix, if configured."""
    prefix = doc.get("tool", {}).get("mono-dev", {}).get("prefix")
    return str(prefix) if prefix else None
