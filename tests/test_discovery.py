# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for input path expansion."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintdispatch.config import DispatchConfig
from lintdispatch.discovery import UnreadablePathError, absolute_input, expand_path, iter_files


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_iter_files_is_sorted_and_prunes_excluded(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    _touch(root / "b.py")
    _touch(root / "a.py")
    _touch(root / "pkg" / "c.py")
    _touch(root / "node_modules" / "lib.js")
    _touch(root / ".git" / "config")
    _touch(root / "build" / "out.js")

    files = list(iter_files(root, excluded=DispatchConfig().excluded | {"build"}))

    assert files == [root / "a.py", root / "b.py", root / "pkg" / "c.py"]


def test_iter_files_skips_symlinks_by_default(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    real = _touch(root / "real" / "mod.py")
    (root / "link.py").symlink_to(real)
    (root / "linked-dir").symlink_to(root / "real", target_is_directory=True)

    assert list(iter_files(root)) == [real]

    followed = list(iter_files(root, follow_symlinks=True))
    assert root / "link.py" in followed
    assert root / "linked-dir" / "mod.py" in followed


def test_expand_path_yields_single_file(tmp_path: Path) -> None:
    target = _touch(tmp_path / "only.sh")

    assert list(expand_path(target, DispatchConfig())) == [target.resolve()]


def test_expand_path_honours_extra_excludes(tmp_path: Path) -> None:
    _touch(tmp_path / "keep" / "a.md")
    _touch(tmp_path / "generated" / "b.md")
    config = DispatchConfig(extra_excludes=frozenset({"generated"}))

    files = list(expand_path(tmp_path, config))

    assert files == [(tmp_path / "keep" / "a.md").resolve()]


def test_missing_input_is_unreadable(tmp_path: Path) -> None:
    missing = tmp_path / "nope.py"

    with pytest.raises(UnreadablePathError) as excinfo:
        absolute_input(missing)

    assert excinfo.value.path == str(missing)
    assert str(excinfo.value) == f"Cannot read: {missing}, error: file not found"


def test_expand_path_raises_on_first_iteration(tmp_path: Path) -> None:
    files = expand_path(tmp_path / "gone", DispatchConfig())

    with pytest.raises(UnreadablePathError):
        next(files)


def _deny(monkeypatch: pytest.MonkeyPatch, method: str, name: str) -> None:
    original = getattr(Path, method)

    def _guarded(self: Path, *args: object, **kwargs: object) -> bool:
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, method, _guarded)


def test_untraversable_entry_is_reported_and_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()
    keep = _touch(root / "a.sh")
    locked = _touch(root / "locked" / "b.sh")
    _deny(monkeypatch, "is_file", "b.sh")
    errors: list[tuple[str, OSError]] = []

    files = list(iter_files(root, on_error=lambda path, exc: errors.append((path, exc))))

    assert files == [keep]
    assert [path for path, _ in errors] == [str(locked)]
    assert isinstance(errors[0][1], PermissionError)


def test_unreadable_symlink_check_skips_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()
    _touch(root / "sealed" / "c.py")
    keep = _touch(root / "open" / "d.py")
    _deny(monkeypatch, "is_symlink", "sealed")
    errors: list[str] = []

    files = list(iter_files(root, on_error=lambda path, exc: errors.append(path)))

    assert files == [keep]
    assert errors == [str(root / "sealed")]
