# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fake executables and loggers for dispatcher tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lintdispatch.logging import announcement_lines, spawn_failure_message, unreadable_message


def write_executable(directory: Path, name: str, *, exit_code: int = 0, log: Path | None = None) -> Path:
    """Write a shell script that optionally records its arguments and exits with ``exit_code``."""

    directory.mkdir(parents=True, exist_ok=True)
    script = directory / name
    lines = ["#!/bin/sh"]
    if log is not None:
        lines.append(f'echo "{name} $*" >> "{log}"')
    lines.append(f"exit {exit_code}")
    script.write_text("\n".join(lines) + "\n", encoding="utf-8")
    script.chmod(0o755)
    return script


@dataclass
class RecordingLogger:
    """Collects the plain text of dispatcher messages per kind."""

    echoed: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    debugs: list[str] = field(default_factory=list)

    def announce(self, command: str, config_path: str, files: str) -> None:
        self.echoed.extend(announcement_lines(command, config_path, files))

    def unreadable(self, path: str, reason: str) -> None:
        self.warnings.append(unreadable_message(path, reason))

    def spawn_failed(self, program: str, reason: str) -> None:
        self.failures.append(spawn_failure_message(program, reason))

    def debug(self, message: str) -> None:
        self.debugs.append(message)
