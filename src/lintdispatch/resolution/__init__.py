# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution pipeline mapping files to tools, configs and commands."""

from __future__ import annotations

from .ancestors import config_predicate, find_config, local_bin_predicate, search_ancestors
from .classifier import classify, extension_of
from .executables import ExecutableResolver
from .resolver import TargetResolver, build_command

__all__ = [
    "ExecutableResolver",
    "TargetResolver",
    "build_command",
    "classify",
    "config_predicate",
    "extension_of",
    "find_config",
    "local_bin_predicate",
    "search_ancestors",
]
