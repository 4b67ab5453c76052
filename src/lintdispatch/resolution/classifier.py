# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map a file path to the tool family that handles it."""

from __future__ import annotations

from pathlib import PurePath

from ..tools.base import ToolDescriptor
from ..tools.registry import ToolRegistry


def extension_of(path: str | PurePath) -> str:
    """Return the basename substring from the last ``.`` to the end, or ``""``.

    Unlike :attr:`PurePath.suffix` a leading dot counts, so ``.bashrc`` yields
    ``".bashrc"``.
    """

    name = PurePath(path).name
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def classify(path: str | PurePath, registry: ToolRegistry) -> ToolDescriptor | None:
    """Return the descriptor registered for ``path`` or ``None`` to skip it.

    Args:
        path: File path to classify; only its basename is inspected.
        registry: Registry holding the extension index.

    Returns:
        ToolDescriptor | None: Matching descriptor, ``None`` when unclassified.
    """

    extension = extension_of(path)
    candidate = extension if extension else PurePath(path).name
    if not candidate:
        return None
    tool = registry.lookup(candidate)
    if tool is None:
        tool = registry.lookup_folded(candidate)
    return tool


__all__ = ["classify", "extension_of"]
