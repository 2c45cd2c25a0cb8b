"""Tests for mono_dev.fs."""

from __future__ import annotations

from pathlib import Path

import pytest

from mono_dev.fs import BUILD_DIRS, PATHS_EXCL, clean_build, read_dir, rimraf


def _touch(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestReadDir:
    def test_skips_excluded_dirs(self, tmp_path: Path) -> None:
        _touch(tmp_path / "pkg" / "a.py")
        _touch(tmp_path / "pkg" / "__pycache__" / "a.py")
        _touch(tmp_path / "build" / "lib" / "a.py")
        _touch(tmp_path / "notes.txt")

        assert read_dir(tmp_path, [".py"]) == [tmp_path / "pkg" / "a.py"]

    def test_excludes_tool_and_venv_dirs_only(self, tmp_path: Path) -> None:
        assert PATHS_EXCL == [".git", ".venv", "__pycache__", *BUILD_DIRS]
        _touch(tmp_path / ".venv" / "lib" / "site.py")
        _touch(tmp_path / ".mypy_cache" / "stub.pyi")
        vendored = _touch(tmp_path / "node_modules" / "tool.py")

        assert read_dir(tmp_path, [".py", ".pyi"]) == [vendored]

    def test_file_source_is_fatal(self, tmp_path: Path) -> None:
        src = _touch(tmp_path / "file.txt")
        with pytest.raises(SystemExit):
            read_dir(src, [".py"])


class TestClean:
    def test_rimraf_missing_is_noop(self, tmp_path: Path) -> None:
        rimraf(tmp_path / "missing")

    def test_clean_build(self, tmp_path: Path) -> None:
        _touch(tmp_path / "dist" / "x.whl")
        _touch(tmp_path / "packages" / "core" / "build" / "lib" / "x.py")
        _touch(tmp_path / "packages" / "core" / "core.egg-info" / "PKG-INFO")
        src = _touch(tmp_path / "packages" / "core" / "core" / "__init__.py")

        removed = clean_build(tmp_path)

        assert set(removed) == {
            tmp_path / "dist",
            tmp_path / "packages" / "core" / "build",
            tmp_path / "packages" / "core" / "core.egg-info",
        }
        assert not (tmp_path / "dist").exists()
        assert not (tmp_path / "packages" / "core" / "build").exists()
        assert src.exists()
