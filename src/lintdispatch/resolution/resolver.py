# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Full per-file resolution: tool, configuration, executable and command."""

from __future__ import annotations

from pathlib import Path

from ..command import CommandLine
from ..models import ResolvedTarget
from ..tools.base import ToolDescriptor
from ..tools.registry import ToolRegistry
from .ancestors import find_config
from .classifier import classify
from .executables import ExecutableResolver


def build_command(executable: str, config_path: str, tool: ToolDescriptor) -> CommandLine:
    """Return the command line for ``tool``.

    Args:
        executable: Resolved executable path, or ``""`` when none was found.
        config_path: Resolved configuration path, or ``""`` when none was found.
        tool: Tool family whose flag grammar applies.

    Returns:
        CommandLine: The default command verbatim when ``executable`` is empty
        (``config_path`` is ignored), otherwise the builder's output.
    """

    if not executable:
        return CommandLine.parse(tool.default_command)
    return tool.builder_for(executable)(executable, config_path)


class TargetResolver:
    """Resolve input files into :class:`ResolvedTarget` instances."""

    def __init__(self, registry: ToolRegistry, executables: ExecutableResolver | None = None) -> None:
        self._registry = registry
        self._executables = executables or ExecutableResolver()

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def resolve(self, path: Path) -> ResolvedTarget | None:
        """Return the resolution for ``path`` or ``None`` when no tool applies.

        Args:
            path: Absolute path of the file to resolve.
        """

        tool = classify(path, self._registry)
        if tool is None:
            return None
        config_path = find_config(path, tool.config_files)
        executable = self._executables.resolve(path, tool)
        return ResolvedTarget(
            path=path,
            tool=tool,
            config_path=config_path,
            executable=executable,
            command=build_command(executable, config_path, tool),
        )


__all__ = ["TargetResolver", "build_command"]
