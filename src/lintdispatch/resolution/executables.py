# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the executable that should run a tool family for a given file."""

from __future__ import annotations

import shutil
from pathlib import Path

from ..tools.base import ToolDescriptor
from .ancestors import local_bin_predicate, search_ancestors


class ExecutableResolver:
    """Resolve executables: project-local bin, then the search path.

    An empty result means nothing was found and the family's default command
    should be used. Resolution never fails; a command that turns out not to be
    runnable is reported when the batch is spawned.
    """

    def __init__(self, *, search_path: str | None = None) -> None:
        """Create a resolver.

        Args:
            search_path: ``os.pathsep``-separated directories consulted instead
                of ``PATH``. ``None`` uses the process environment.
        """

        self._search_path = search_path

    def resolve(self, path: Path, tool: ToolDescriptor) -> str:
        """Return the executable for ``tool`` relative to ``path``, or ``""``."""

        return self.find_local(path, tool) or self.find_on_path(tool) or ""

    def find_local(self, path: Path, tool: ToolDescriptor) -> str | None:
        """Return a candidate from the nearest project-local bin directory."""

        if tool.local_bin is None or not tool.executables:
            return None
        return search_ancestors(path, local_bin_predicate(tool.local_bin, tool.executables))

    def find_on_path(self, tool: ToolDescriptor) -> str | None:
        """Return the first candidate executable present on the search path."""

        for name in tool.executables:
            found = shutil.which(name, path=self._search_path)
            if found is not None:
                return found
        return None


__all__ = ["ExecutableResolver"]
