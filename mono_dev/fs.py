"""Filesystem helpers for the lint and clean commands."""

from __future__ import annotations

import shutil
from pathlib import Path

from .shell import fatal

# Directories that build, lint and test tools write into
BUILD_DIRS = ["build", "dist", ".mypy_cache", ".pytest_cache", ".ruff_cache"]

# Directories skipped when walking source trees
PATHS_EXCL = [".git", ".venv", "__pycache__", *BUILD_DIRS]


def rimraf(path: Path) -> None:
    """Delete a file or directory tree if it exists (no glob support)."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def read_dir(
    src: Path, extensions: list[str], files: list[Path] | None = None
) -> list[Path]:
    """Recursively list files under ``src`` matching one of ``extensions``.

    Directories in PATHS_EXCL are not descended into.
    """
    if not src.is_dir():
        fatal(f"Source {src} should be a directory")

    files = [] if files is None else files
    for entry in sorted(src.iterdir()):
        if entry.is_dir():
            if entry.name not in PATHS_EXCL:
                read_dir(entry, extensions, files)
        elif any(entry.name.endswith(e) for e in extensions):
            files.append(entry)
    return files


def clean_paths(directory: Path) -> list[Path]:
    """Build artefacts directly inside ``directory`` (dirs and *.egg-info)."""
    if not directory.is_dir():
        return []
    paths = [directory / d for d in BUILD_DIRS]
    paths.extend(sorted(directory.glob("*.egg-info")))
    return [p for p in paths if p.exists()]


def clean_build(root: Path) -> list[Path]:
    """Remove build artefacts from the root, packages/ and every package.

    Returns:
        The paths that were removed.
    """
    pkgs = root / "packages"
    targets = clean_paths(root) + clean_paths(pkgs)
    if pkgs.is_dir():
        for d in sorted(pkgs.iterdir()):
            if d.is_dir():
                targets.extend(clean_paths(d))

    for path in targets:
        rimraf(path)
    return targets
