# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintdispatch package."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .command import CommandLine
from .constants import DEFAULT_FILE_DELIMITER
from .tools.base import ToolDescriptor


class ResolvedTarget(BaseModel):
    """Resolution outcome for a single input file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    tool: ToolDescriptor | None = None
    config_path: str = ""
    executable: str = ""
    command: CommandLine | None = None

    @property
    def uses_default_command(self) -> bool:
        """Return ``True`` when no executable was resolved for the file."""

        return not self.executable


class Batch(BaseModel):
    """Files sharing one resolved configuration, executed as one process.

    The command is frozen when the batch is created; files appended later
    run under that command even if their own resolution differed.
    """

    model_config = ConfigDict(validate_assignment=True)

    key: str
    command: CommandLine
    config_path: str = ""
    files: list[str] = Field(default_factory=list)

    def argv(self) -> list[str]:
        """Return the argument vector including every file in the batch."""

        return self.command.with_files(self.files)

    def command_line(self, *, delimiter: str = DEFAULT_FILE_DELIMITER) -> str:
        """Return the flat command string with files joined by ``delimiter``."""

        return self.command.render(self.files, delimiter=delimiter)


class BatchResult(BaseModel):
    """Exit status observed for one executed batch."""

    model_config = ConfigDict(frozen=True)

    batch: Batch
    exit_code: int
    started: bool = True

    @property
    def failed(self) -> bool:
        return self.exit_code != 0


class DispatchResult(BaseModel):
    """Aggregate outcome of a dispatcher run."""

    model_config = ConfigDict(validate_assignment=True)

    results: list[BatchResult] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def exit_code(self) -> int:
        """Return the exit code of the last failing batch, or ``0``."""

        code = 0
        for result in self.results:
            if result.exit_code != 0:
                code = result.exit_code
        return code

    @property
    def failed(self) -> bool:
        return self.exit_code != 0


__all__ = ["Batch", "BatchResult", "DispatchResult", "ResolvedTarget"]
