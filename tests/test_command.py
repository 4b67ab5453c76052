# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for structured command lines."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lintdispatch.command import CommandLine


def test_parse_peels_environment_prefix() -> None:
    command = CommandLine.parse("PHP_CS_FIXER_IGNORE_ENV=true php-cs-fixer fix --using-cache=no")

    assert command.env == {"PHP_CS_FIXER_IGNORE_ENV": "true"}
    assert command.argv == ("php-cs-fixer", "fix", "--using-cache=no")


def test_parse_keeps_assignments_after_program() -> None:
    command = CommandLine.parse("phpcbf --standard=PSR12")

    assert command.env == {}
    assert command.argv == ("phpcbf", "--standard=PSR12")


def test_render_joins_env_argv_and_files() -> None:
    command = CommandLine.of("php-cs-fixer", "fix", env={"PHP_CS_FIXER_IGNORE_ENV": "true"})

    assert command.render(["a.php", "b.php"]) == "PHP_CS_FIXER_IGNORE_ENV=true php-cs-fixer fix a.php b.php"
    assert str(command) == "PHP_CS_FIXER_IGNORE_ENV=true php-cs-fixer fix"


def test_with_files_appends_arguments() -> None:
    command = CommandLine.of("/usr/bin/flake8", "--config", "/p/.flake8")

    assert command.with_files(["/p/a.py"]) == ["/usr/bin/flake8", "--config", "/p/.flake8", "/p/a.py"]
    assert command.program == "/usr/bin/flake8"


def test_empty_command_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CommandLine.parse("")
