# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-family command builders.

Each builder is a pure function of ``(executable, config_path)``. Builders never
emit a configuration flag with an empty value: when ``config_path`` is empty the
flag is left out and the family's no-config form is returned instead.
"""

from __future__ import annotations

from typing import Final

from ..command import CommandLine

PHP_INTERPRETER: Final[tuple[str, ...]] = ("php", "-dmemory_limit=-1")
PHP_CS_FIXER_ENV: Final[dict[str, str]] = {"PHP_CS_FIXER_IGNORE_ENV": "true"}
SQLFLUFF_DIALECT: Final[str] = "ansi"


def _with_optional_config(
    executable: str,
    config_path: str,
    *,
    fixed: tuple[str, ...] = (),
    flag: str,
) -> CommandLine:
    if config_path:
        return CommandLine.of(executable, *fixed, flag, config_path)
    return CommandLine.of(executable, *fixed)


def build_prettier(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, fixed=("--write",), flag="--config")


def build_eslint(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, fixed=("--fix",), flag="--config")


def build_flake8(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--config")


def build_pylint(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--rcfile")


def build_black(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--config")


def build_gofmt(executable: str, config_path: str) -> CommandLine:
    if config_path:
        return CommandLine.of(executable, "-w", "-config", config_path)
    return CommandLine.of(executable, "-s", "-w")


def build_golangci_lint(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, fixed=("run",), flag="--config")


def build_rustfmt(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--config-path")


def build_cargo_clippy(executable: str, config_path: str) -> CommandLine:
    """Return the clippy command; clippy reads its configuration implicitly."""

    del config_path
    return CommandLine.of(executable)


def build_clang_format(executable: str, config_path: str) -> CommandLine:
    if config_path:
        return CommandLine.of(executable, f"-style=file:{config_path}")
    return CommandLine.of(executable)


def build_google_java_format(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--aosp")


def build_phpcbf(executable: str, config_path: str) -> CommandLine:
    standard = config_path or "PSR12"
    return CommandLine.of(*PHP_INTERPRETER, executable, f"--standard={standard}")


def build_php_cs_fixer(executable: str, config_path: str) -> CommandLine:
    if config_path:
        return CommandLine.of(
            *PHP_INTERPRETER,
            executable,
            "fix",
            "--using-cache=no",
            f"--config={config_path}",
            env=PHP_CS_FIXER_ENV,
        )
    return CommandLine.of(
        *PHP_INTERPRETER,
        executable,
        "fix",
        "--rules=@Symfony,@PSR12",
        "--using-cache=no",
        env=PHP_CS_FIXER_ENV,
    )


def build_stylelint(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--config")


def build_shellcheck(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--rcfile")


def build_sqlfluff(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(
        executable,
        config_path,
        fixed=("format", "--dialect", SQLFLUFF_DIALECT),
        flag="--config",
    )


def build_hadolint(executable: str, config_path: str) -> CommandLine:
    return _with_optional_config(executable, config_path, flag="--config")


__all__ = [
    "build_black",
    "build_cargo_clippy",
    "build_clang_format",
    "build_eslint",
    "build_flake8",
    "build_gofmt",
    "build_golangci_lint",
    "build_google_java_format",
    "build_hadolint",
    "build_php_cs_fixer",
    "build_phpcbf",
    "build_prettier",
    "build_pylint",
    "build_rustfmt",
    "build_shellcheck",
    "build_sqlfluff",
    "build_stylelint",
]
