# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols shared between the dispatcher and its front ends."""

from __future__ import annotations

from collections.abc import Sequence
from subprocess import CompletedProcess
from typing import Protocol, runtime_checkable

from .process import CommandOptions


@runtime_checkable
class DispatchLogger(Protocol):
    """Sink for the dispatcher's user-facing messages."""

    def announce(self, command: str, config_path: str, files: str) -> None:
        """Report a batch about to run: its command, shared config and joined files."""

    def unreadable(self, path: str, reason: str) -> None:
        """Report an input or walked entry that was skipped because it could not be read."""

    def spawn_failed(self, program: str, reason: str) -> None:
        """Report a batch whose process could not be started."""

    def debug(self, message: str) -> None: ...


class CommandRunner(Protocol):
    """Callable executing one batch command."""

    def __call__(
        self,
        args: Sequence[str],
        *,
        options: CommandOptions | None = None,
    ) -> CompletedProcess[bytes]: ...


__all__ = ["CommandRunner", "DispatchLogger"]
