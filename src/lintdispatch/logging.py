# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wording and Rich styling of the messages a dispatch run produces."""

from __future__ import annotations

from typing import Final, Literal

from rich.text import Text

Level = Literal["ok", "info", "warn", "fail"]

_LEVEL_GLYPHS: Final[dict[str, str]] = {"ok": "✅ ", "info": "ℹ️ ", "warn": "⚠️ ", "fail": "❌ "}
_LEVEL_STYLES: Final[dict[str, str]] = {"ok": "green", "info": "cyan", "warn": "yellow", "fail": "red"}
_ANNOUNCE_STYLES: Final[dict[str, str]] = {"Executable": "bold blue", "Config": "magenta", "Files": "green"}


def unreadable_message(path: str, reason: str) -> str:
    return f"Cannot read: {path}, error: {reason}"


def spawn_failure_message(program: str, reason: str) -> str:
    return f"Cannot run formatter/linter '{program}': {reason}"


def announcement_lines(command: str, config_path: str, files: str) -> list[str]:
    """Return the plain ``Executable``/``Config``/``Files`` lines printed before a batch runs."""

    return [f"{label}: {value}" for label, value in _announcement_fields(command, config_path, files)]


def _announcement_fields(command: str, config_path: str, files: str) -> list[tuple[str, str]]:
    return [("Executable", command), ("Config", config_path), ("Files", files)]


def render_announcement(command: str, config_path: str, files: str) -> Text:
    """Return the styled batch announcement.

    Args:
        command: Rendered command line of the batch, without its files.
        config_path: Configuration shared by the batch, ``""`` when none.
        files: Batch files joined with the configured delimiter.

    Returns:
        Text: Three lines with bold labels; colour is dropped by consoles
        created with ``no_color``.
    """

    text = Text()
    for index, (label, value) in enumerate(_announcement_fields(command, config_path, files)):
        if index:
            text.append("\n")
        text.append(f"{label}: ", style="bold")
        text.append(value, style=_ANNOUNCE_STYLES[label])
    return text


def render_status(level: Level, message: str, *, use_emoji: bool) -> Text:
    """Return ``message`` styled for ``level`` with an optional emoji prefix."""

    text = Text(_LEVEL_GLYPHS[level] if use_emoji else "")
    text.append(message, style=_LEVEL_STYLES[level])
    return text


__all__ = [
    "Level",
    "announcement_lines",
    "render_announcement",
    "render_status",
    "spawn_failure_message",
    "unreadable_message",
]
