# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; commands are argument lists built
# from the tool catalog and never pass through a shell.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(slots=True)
class CommandOptions:
    """Execution options for a child process.

    ``env`` is overlaid on the parent environment rather than replacing it.
    ``search_path`` replaces ``PATH`` when locating a bare program name.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    search_path: str | None = None


def _normalize_args(args: Sequence[str], *, search_path: str | None = None) -> list[str]:
    """Return ``args`` with the program resolved to an executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the program cannot be located.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute() or os.sep in head:
        if not head_path.exists():
            raise FileNotFoundError(f"Executable '{head}' does not exist")
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[bytes]:
    """Execute ``args`` with inherited standard streams.

    Args:
        args: Command and argument sequence to execute.
        options: Working directory, environment overlay and search path.

    Returns:
        CompletedProcess: Subprocess execution metadata; output is not captured.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        OSError: If the process cannot be started.
    """

    resolved_options = options or CommandOptions()
    normalized = _normalize_args(args, search_path=resolved_options.search_path)
    env = None
    if resolved_options.env:
        env = {**os.environ, **resolved_options.env}
    # Bandit: arguments come from the tool catalog and are passed without a shell.
    return subprocess.run(  # nosec B603
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=env,
        check=False,
    )


__all__ = ["CommandOptions", "run_command"]
