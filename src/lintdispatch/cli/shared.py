# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console provisioning and the CLI implementation of the dispatcher logger."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from functools import cache

from rich.console import Console
from rich.text import Text

from ..logging import (
    Level,
    render_announcement,
    render_status,
    spawn_failure_message,
    unreadable_message,
)


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def console_for(*, color: bool, emoji: bool, tty: bool) -> Console:
    """Return the shared Rich console for the given output preferences.

    The console binds to ``sys.stdout`` lazily, so a cached instance follows
    stream redirection; ``tty`` is part of the key because it fixes
    ``force_terminal`` at construction.
    """

    return Console(
        color_system="auto" if color and tty else None,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


@dataclass(slots=True)
class CLILogger:
    """Dispatcher logger printing announcements and problems to a Rich console."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def announce(self, command: str, config_path: str, files: str) -> None:
        self.console.print(render_announcement(command, config_path, files))

    def unreadable(self, path: str, reason: str) -> None:
        self.status("warn", unreadable_message(path, reason))

    def spawn_failed(self, program: str, reason: str) -> None:
        self.status("fail", spawn_failure_message(program, reason))

    def status(self, level: Level, message: str) -> None:
        """Print a run-level status line such as the final summary."""

        self.console.print(render_status(level, message, use_emoji=self.use_emoji))

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs are highlighted; ``command`` values stand out.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether status lines may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger bound to a cached Rich console.
    """

    console = console_for(color=not no_color, emoji=emoji, tty=detect_tty())
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger", "console_for", "detect_tty"]
