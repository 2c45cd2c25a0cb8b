"""Dependency handling utilities.

Provides functions for parsing PEP 508 dependency strings and picking out
the internal (workspace) dependencies declared by a package manifest.
"""

from __future__ import annotations

from collections.abc import Collection

import tomlkit
from packaging.requirements import Requirement
from packaging.utils import canonicalize_name

from .toml import get_all_dependency_strings


def dep_canonical_name(dep_str: str) -> str:
    """Extract the canonical package name from a PEP 508 dependency string.

    Handles version specifiers, extras, and normalizes the name per PEP 503
    (lowercase, hyphens instead of underscores).

    Examples:
        "requests>=2.0" → "requests"
        "My_Package[extra]~=1.0" → "my-package"
    """
    return canonicalize_name(Requirement(dep_str).name)


def internal_deps(
    doc: tomlkit.TOMLDocument,
    workspace_names: Collection[str],
    prefix: str | None = None,
) -> list[str]:
    """List the internal dependencies declared in a manifest.

    A dependency is internal when its canonical name is a workspace member
    and, if ``prefix`` is given, starts with that namespace prefix.
    Declaration order is kept and repeats (e.g. the same package listed in
    both runtime deps and an extra) are dropped.

    Args:
        doc: Parsed pyproject.toml of the package.
        workspace_names: Canonical names of all workspace packages.
        prefix: Optional reserved namespace, e.g. "acme-".
    """
    if prefix is not None:
        prefix = canonicalize_name(prefix.rstrip("-_.")) + "-"

    deps: list[str] = []
    for dep_str in get_all_dependency_strings(doc):
        name = dep_canonical_name(dep_str)
        if name not in workspace_names or name in deps:
            continue
        if prefix is not None and not name.startswith(prefix):
            continue
        deps.append(name)
    return deps
