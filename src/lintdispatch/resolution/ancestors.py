# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Upward directory searches for configuration files and local binaries."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from ..tools.base import LocalBinConvention

T = TypeVar("T")


def search_ancestors(start: Path, predicate: Callable[[Path], T | None]) -> T | None:
    """Apply ``predicate`` to each ancestor directory of ``start``.

    The walk begins at ``start`` when it is a directory and at its parent
    otherwise. It stops at the first non-``None`` result. The file-system root
    is never tested, and the walk also ends when taking the parent no longer
    changes the path.

    Args:
        start: Absolute file or directory path where the search begins.
        predicate: Callable returning a result for a matching directory.

    Returns:
        T | None: First predicate result, or ``None`` when nothing matched.
    """

    try:
        start_is_dir = start.is_dir()
    except OSError:
        start_is_dir = False
    current = start if start_is_dir else start.parent
    while True:
        if current == Path(current.anchor):
            return None
        result = predicate(current)
        if result is not None:
            return result
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _present(candidate: Path) -> bool:
    """Return ``True`` when ``candidate`` exists; an entry that cannot be stat'ed is absent."""

    try:
        return candidate.exists()
    except OSError:
        return False


def config_predicate(config_files: Sequence[str]) -> Callable[[Path], str | None]:
    """Return a predicate finding the first existing config file in priority order."""

    def _find(directory: Path) -> str | None:
        for name in config_files:
            candidate = directory / name
            if _present(candidate):
                return str(candidate)
        return None

    return _find


def local_bin_predicate(
    convention: LocalBinConvention,
    executables: Sequence[str],
) -> Callable[[Path], str | None]:
    """Return a predicate finding a candidate executable in a project-local bin dir."""

    def _find(directory: Path) -> str | None:
        bin_dir = Path(convention.directory(directory))
        for name in executables:
            candidate = bin_dir / name
            if _present(candidate):
                return str(candidate)
        return None

    return _find


def find_config(path: Path, config_files: Sequence[str]) -> str:
    """Return the nearest configuration file for ``path``, or ``""``."""

    if not config_files:
        return ""
    return search_ancestors(path, config_predicate(config_files)) or ""


__all__ = ["config_predicate", "find_config", "local_bin_predicate", "search_ancestors"]
