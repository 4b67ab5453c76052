# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Definitions for tool families and their command-construction rules."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import PurePath
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..command import CommandLine

CommandBuilder: TypeAlias = Callable[[str, str], CommandLine]
"""Pure function turning ``(executable, config_path)`` into a command.

An empty ``config_path`` means no configuration file was found and the builder
must omit its configuration flag entirely.
"""


class LocalBinConvention(BaseModel):
    """Project-local binary directory used by an ecosystem's package manager."""

    model_config = ConfigDict(frozen=True)

    ecosystem: str
    parts: tuple[str, ...]

    def directory(self, base: PurePath) -> PurePath:
        """Return the binary directory rooted at ``base``."""

        return base.joinpath(*self.parts)


NODE_MODULES_BIN = LocalBinConvention(ecosystem="npm", parts=("node_modules", ".bin"))
COMPOSER_VENDOR_BIN = LocalBinConvention(ecosystem="composer", parts=("vendor", "bin"))


class ToolDescriptor(BaseModel):
    """Static description of one language/tool family.

    Descriptors are immutable and shared read-only by every resolution call.
    ``extensions`` entries that start with ``.`` are file extensions; any other
    entry is matched against the full basename (``Dockerfile``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    extensions: tuple[str, ...]
    config_files: tuple[str, ...] = Field(default_factory=tuple)
    executables: tuple[str, ...] = Field(default_factory=tuple)
    default_command: str
    builder: CommandBuilder
    builders: Mapping[str, CommandBuilder] = Field(default_factory=dict)
    is_formatter: bool = False
    local_bin: LocalBinConvention | None = None

    @field_validator("extensions", "config_files", "executables", mode="before")
    @classmethod
    def _coerce_names(cls, value: object) -> tuple[str, ...]:
        """Normalise name collections into tuples preserving declared order.

        Raises:
            ValueError: If ``value`` is a bare string rather than a collection.
        """

        if value is None:
            return ()
        if isinstance(value, str):
            raise ValueError("expected a sequence of names, not a single string")
        if not isinstance(value, (list, tuple)):
            raise ValueError("expected a sequence of names")
        return tuple(str(item) for item in value)

    @field_validator("default_command")
    @classmethod
    def _validate_default(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_command must not be empty")
        return value

    def builder_for(self, executable: str) -> CommandBuilder:
        """Return the command builder matching the resolved ``executable``.

        Args:
            executable: Path or name of the resolved executable.

        Returns:
            CommandBuilder: Executable-specific builder when registered, else the family builder.
        """

        return self.builders.get(PurePath(executable).name, self.builder)


__all__ = [
    "COMPOSER_VENDOR_BIN",
    "CommandBuilder",
    "LocalBinConvention",
    "NODE_MODULES_BIN",
    "ToolDescriptor",
]
