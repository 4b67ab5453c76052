# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across lintdispatch modules."""

from __future__ import annotations

from typing import Final

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        "node_modules",
        "target",
        "vendor",
        ".venv",
        "venv",
    }
)

DEFAULT_FILE_DELIMITER: Final[str] = " "

# Exit status recorded when a batch process could not be started at all.
GENERIC_FAILURE_EXIT_CODE: Final[int] = 1

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintdispatch"
PROJECT_CONFIG_FILENAME: Final[str] = ".lintdispatch.toml"

__all__ = [
    "ALWAYS_EXCLUDE_DIRS",
    "DEFAULT_FILE_DELIMITER",
    "GENERIC_FAILURE_EXIT_CODE",
    "PROJECT_CONFIG_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
]
