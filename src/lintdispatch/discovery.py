# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Expand input paths into the files to resolve."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .config import DispatchConfig
from .logging import unreadable_message

ErrorCallback = Callable[[str, OSError], None]


class UnreadablePathError(OSError):
    """Raised when an input path cannot be made absolute or does not exist."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(unreadable_message(path, reason))
        self.path = path
        self.reason = reason


def absolute_input(raw: str | Path) -> Path:
    """Return ``raw`` as an existing absolute path.

    Raises:
        UnreadablePathError: If the path cannot be resolved or does not exist.
    """

    text = str(raw)
    try:
        resolved = Path(raw).expanduser().resolve()
        present = resolved.exists()
    except (OSError, RuntimeError) as exc:  # RuntimeError covers symlink loops
        raise UnreadablePathError(text, str(exc)) from exc
    if not present:
        raise UnreadablePathError(text, "file not found")
    return resolved


def iter_files(
    root: Path,
    *,
    excluded: Iterable[str] = (),
    follow_symlinks: bool = False,
    on_error: ErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield files under ``root`` in sorted order, pruning excluded directories.

    Args:
        root: Directory to traverse.
        excluded: Directory names never descended into.
        follow_symlinks: Descend into and yield symlinked entries when ``True``.
        on_error: Called with ``(path, error)`` for directories that cannot be
            listed and entries whose file type cannot be read; both are skipped.

    Yields:
        Path: Regular files found beneath ``root``.
    """

    skip = frozenset(excluded)

    def _report(exc: OSError) -> None:
        if on_error is not None:
            on_error(str(exc.filename or root), exc)

    def _keep(candidate: Path, *, want_file: bool) -> bool:
        try:
            if not follow_symlinks and candidate.is_symlink():
                return False
            return candidate.is_file() if want_file else True
        except OSError as exc:
            if on_error is not None:
                on_error(str(candidate), exc)
            return False

    for dirpath, dirnames, filenames in os.walk(root, onerror=_report, followlinks=follow_symlinks):
        directory = Path(dirpath)
        dirnames[:] = sorted(
            name for name in dirnames if name not in skip and _keep(directory / name, want_file=False)
        )
        for filename in sorted(filenames):
            candidate = directory / filename
            if _keep(candidate, want_file=True):
                yield candidate


def expand_path(
    raw: str | Path,
    config: DispatchConfig,
    *,
    on_error: ErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield the files named by one input path.

    A file input yields itself; a directory input yields every file beneath it.

    Raises:
        UnreadablePathError: If ``raw`` cannot be resolved or does not exist.
    """

    resolved = absolute_input(raw)
    try:
        is_dir = resolved.is_dir()
    except OSError as exc:
        raise UnreadablePathError(str(raw), str(exc)) from exc
    if is_dir:
        yield from iter_files(
            resolved,
            excluded=config.excluded,
            follow_symlinks=config.follow_symlinks,
            on_error=on_error,
        )
    else:
        yield resolved


__all__ = ["UnreadablePathError", "absolute_input", "expand_path", "iter_files"]
