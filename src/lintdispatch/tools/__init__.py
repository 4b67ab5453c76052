# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool family descriptors, command builders and the registry."""

from __future__ import annotations

from .base import CommandBuilder, LocalBinConvention, ToolDescriptor
from .catalog import BUILTIN_TOOLS
from .registry import ToolRegistry, build_default_registry

__all__ = [
    "BUILTIN_TOOLS",
    "CommandBuilder",
    "LocalBinConvention",
    "ToolDescriptor",
    "ToolRegistry",
    "build_default_registry",
]
