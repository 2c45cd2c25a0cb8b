"""Interpreter ("engine") version checks.

Compares the running Python against the root manifest's requires-python,
so that development commands fail early on an unsupported interpreter.
"""

from __future__ import annotations

import sys

import semver
import tomlkit
from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version

from .shell import fatal
from .toml import get_requires_python

# Operators whose version is a floor for the interpreter; longest first
LOWER_BOUND_OPERATORS = ("~=", "==", ">=", ">")


def engine_version_split(ver: str | None) -> tuple[int, int, int]:
    """Split an engine version such as ">=3.10" into (major, minor, patch).

    Accepts any PEP 440 version behind an optional comparison operator.
    Only the release part is kept, missing parts are 0 and None means ">=0":
    - ">=3.10" → (3, 10, 0)
    - "v3.12.1" → (3, 12, 1)
    - ">=3.13.0rc1" → (3, 13, 0)
    - "==3.11.*" → (3, 11, 0)
    - None → (0, 0, 0)
    """
    text = (ver or ">=0").strip()
    for op in LOWER_BOUND_OPERATORS:
        if text.startswith(op):
            text = text[len(op) :]
            break
    release = Version(text.strip().removesuffix(".*")).release
    major, minor, patch = (*release, 0, 0)[:3]
    return major, minor, patch


def engine_version_cmp(a: str | None, b: str | None) -> int:
    """Compare two engine versions, returning -1, 0 or 1.

    Examples:
        engine_version_cmp("3.9.1", ">=3.10") → -1
        engine_version_cmp("v3.12.0", ">=3.12") → 0
    """
    return semver.Version(*engine_version_split(a)).compare(
        semver.Version(*engine_version_split(b))
    )


def minimum_python(requires_python: str | None) -> str | None:
    """Pick the highest lower bound out of a requires-python specifier.

    "~=", "==" and ">" clauses count as lower bounds alongside ">=".
    Returns the bound as ">=X.Y[.Z]", or None when nothing bounds from below.
    """
    if not requires_python:
        return None
    bounds = [
        f">={spec.version.removesuffix('.*')}"
        for spec in SpecifierSet(requires_python)
        if spec.operator in LOWER_BOUND_OPERATORS
    ]
    if not bounds:
        return None
    return max(bounds, key=engine_version_split)


def current_python() -> str:
    return ".".join(str(p) for p in sys.version_info[:3])


def check_engine(doc: tomlkit.TOMLDocument, current: str | None = None) -> None:
    """Exit with an error when the interpreter does not satisfy requires-python.

    Args:
        doc: Parsed root pyproject.toml.
        current: Version to check, defaults to the running interpreter.
    """
    requires_python = get_requires_python(doc)
    if not requires_python:
        return

    current = current or current_python()
    try:
        allowed = SpecifierSet(requires_python).contains(current, prereleases=True)
    except InvalidSpecifier:
        fatal(f"Invalid requires-python in root pyproject.toml: {requires_python}")
        return
    if allowed:
        return

    required = minimum_python(requires_python)
    if required is not None and engine_version_cmp(current, required) == -1:
        fatal(
            f"At least Python {required.removeprefix('>=')} is required for "
            f"development (running {current})."
        )
    fatal(
        f"Python {requires_python} is required for development (running {current})."
    )
