# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structured command lines with an explicit environment overlay."""

from __future__ import annotations

import re
import shlex
from collections.abc import Iterable, Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ENV_ASSIGNMENT: Final[re.Pattern[str]] = re.compile(r"^(?P<name>[A-Za-z_][A-Za-z0-9_]*)=(?P<value>.*)$")


class CommandLine(BaseModel):
    """Program arguments plus the environment variables they must run with.

    Tool families such as ``php-cs-fixer`` historically carried their
    environment as a ``NAME=value`` prefix of a flat shell string. The prefix is
    kept here as a separate mapping so the process boundary never needs a shell.
    """

    model_config = ConfigDict(frozen=True)

    argv: tuple[str, ...]
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("argv", mode="before")
    @classmethod
    def _coerce_argv(cls, value: Sequence[str] | str) -> tuple[str, ...]:
        """Return ``value`` as a non-empty tuple of arguments.

        Raises:
            ValueError: If no program is supplied.
        """

        if isinstance(value, str):
            value = (value,)
        items = tuple(str(item) for item in value)
        if not items or not items[0]:
            raise ValueError("command requires a program")
        return items

    @classmethod
    def parse(cls, text: str) -> CommandLine:
        """Split a flat command string, peeling leading ``NAME=value`` tokens into ``env``.

        Args:
            text: Shell-style command string, e.g. ``"FOO=1 tool --flag"``.

        Returns:
            CommandLine: Structured command equivalent to ``text``.
        """

        tokens = shlex.split(text)
        env: dict[str, str] = {}
        while tokens:
            match = _ENV_ASSIGNMENT.match(tokens[0])
            if match is None:
                break
            env[match.group("name")] = match.group("value")
            tokens.pop(0)
        return cls(argv=tuple(tokens), env=env)

    @classmethod
    def of(cls, *argv: str, env: dict[str, str] | None = None) -> CommandLine:
        """Build a command from positional arguments."""

        return cls(argv=argv, env=dict(env or {}))

    @property
    def program(self) -> str:
        """Return the program token (first argument)."""

        return self.argv[0]

    def with_files(self, files: Iterable[str]) -> list[str]:
        """Return the argument vector with ``files`` appended."""

        return [*self.argv, *files]

    def render(self, files: Iterable[str] = (), *, delimiter: str = " ") -> str:
        """Return the flat command string, optionally followed by ``files``.

        Args:
            files: File arguments appended after the command.
            delimiter: Separator placed between the joined file arguments.

        Returns:
            str: ``NAME=value`` prefixes, arguments and files joined by spaces.
        """

        head = " ".join([*(f"{name}={value}" for name, value in self.env.items()), *self.argv])
        joined = delimiter.join(files)
        return f"{head} {joined}" if joined else head

    def __str__(self) -> str:
        return self.render()


__all__ = ["CommandLine"]
