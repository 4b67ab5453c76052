# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool registry providing lookup by name and by file extension."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from .base import ToolDescriptor
from .catalog import BUILTIN_TOOLS


class ToolRegistry(Mapping[str, ToolDescriptor]):
    """Central registry for tool family descriptors.

    ``ToolRegistry`` behaves like a read-only mapping whose keys are family
    names and whose values are :class:`ToolDescriptor` instances. It also keeps
    an extension index in which the first registration claiming an extension
    wins; later registrations never overwrite it. A second, lower-cased index
    with the same first-claim rule serves case-insensitive lookups.
    """

    def __init__(self, tools: Iterable[ToolDescriptor] = ()) -> None:
        """Initialise the registry and register ``tools`` in order.

        Args:
            tools: Descriptors registered in declaration order.
        """

        self._tools: dict[str, ToolDescriptor] = {}
        self._by_extension: dict[str, ToolDescriptor] = {}
        self._by_folded: dict[str, ToolDescriptor] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: ToolDescriptor) -> None:
        """Register ``tool`` with the registry enforcing uniqueness by name.

        Args:
            tool: Descriptor to insert into the registry.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool
        for entry in tool.extensions:
            self._by_extension.setdefault(entry, tool)
            self._by_folded.setdefault(entry.lower(), tool)

    def lookup(self, entry: str) -> ToolDescriptor | None:
        """Return the descriptor claiming ``entry`` (extension or bare filename)."""

        return self._by_extension.get(entry)

    def lookup_folded(self, entry: str) -> ToolDescriptor | None:
        """Return the descriptor claiming ``entry`` compared case-insensitively."""

        return self._by_folded.get(entry.lower())

    @property
    def extension_index(self) -> Mapping[str, ToolDescriptor]:
        """Return a read-only view of the extension index."""

        return MappingProxyType(self._by_extension)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __getitem__(self, name: str) -> ToolDescriptor:
        return self._tools[name]


def build_default_registry() -> ToolRegistry:
    """Return a registry populated with the built-in tool catalog."""

    return ToolRegistry(BUILTIN_TOOLS)


__all__ = ["ToolRegistry", "build_default_registry"]
