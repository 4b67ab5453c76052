# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in catalog of supported language/tool families."""

from __future__ import annotations

from typing import Final

from .base import COMPOSER_VENDOR_BIN, NODE_MODULES_BIN, ToolDescriptor
from .commands import (
    build_black,
    build_cargo_clippy,
    build_clang_format,
    build_eslint,
    build_flake8,
    build_gofmt,
    build_golangci_lint,
    build_google_java_format,
    build_hadolint,
    build_php_cs_fixer,
    build_phpcbf,
    build_prettier,
    build_pylint,
    build_rustfmt,
    build_shellcheck,
    build_sqlfluff,
    build_stylelint,
)

ESLINT_CONFIG_FILES: Final[tuple[str, ...]] = (
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintrc.yaml",
    "eslint.config.js",
)

_NODE_BUILDERS = {"eslint": build_eslint, "prettier": build_prettier}

BUILTIN_TOOLS: Final[tuple[ToolDescriptor, ...]] = (
    ToolDescriptor(
        name="python",
        extensions=[".py", ".pyw"],
        config_files=[".flake8", "pyproject.toml", "setup.cfg", "tox.ini", ".pylintrc", "pylintrc"],
        executables=["flake8", "pylint", "black"],
        default_command="flake8",
        builder=build_flake8,
        builders={"flake8": build_flake8, "pylint": build_pylint, "black": build_black},
    ),
    ToolDescriptor(
        name="javascript",
        extensions=[".js", ".mjs", ".cjs", ".jsx"],
        config_files=[
            *ESLINT_CONFIG_FILES,
            "prettier.config.js",
            ".prettierrc",
            ".prettierrc.json",
            ".prettierrc.yml",
            ".prettierrc.yaml",
        ],
        executables=["eslint", "prettier"],
        default_command="eslint --fix",
        builder=build_eslint,
        builders=_NODE_BUILDERS,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="typescript",
        extensions=[".ts", ".tsx"],
        config_files=[*ESLINT_CONFIG_FILES, "prettier.config.js", ".prettierrc", ".prettierrc.json"],
        executables=["eslint", "prettier"],
        default_command="eslint --fix",
        builder=build_eslint,
        builders=_NODE_BUILDERS,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="go",
        extensions=[".go"],
        config_files=[".golangci.yml", ".golangci.yaml", ".golangci.json", ".gofmt.toml", ".gofmt.json"],
        executables=["golangci-lint", "gofmt"],
        default_command="gofmt -w -s",
        is_formatter=True,
        builder=build_gofmt,
        builders={"golangci-lint": build_golangci_lint, "gofmt": build_gofmt},
    ),
    ToolDescriptor(
        name="rust",
        extensions=[".rs"],
        config_files=[".rustfmt.toml", "rustfmt.toml", "rust-toolchain.toml"],
        executables=["rustfmt", "cargo-clippy"],
        default_command="rustfmt",
        is_formatter=True,
        builder=build_rustfmt,
        builders={"cargo-clippy": build_cargo_clippy},
    ),
    ToolDescriptor(
        name="java",
        extensions=[".java"],
        config_files=[".clang-format", "clang-format.yaml", "clang-format.json", "google-java-format.xml"],
        executables=["clang-format", "google-java-format"],
        default_command="clang-format",
        is_formatter=True,
        builder=build_clang_format,
        builders={"google-java-format": build_google_java_format},
    ),
    ToolDescriptor(
        name="php",
        extensions=[".php"],
        config_files=[
            "phpcs.xml",
            "phpcs.xml.dist",
            ".php-cs-fixer",
            ".php-cs-fixer.php",
            ".php-cs-fixer.dist",
            ".php-cs-fixer.dist.php",
        ],
        executables=["phpcbf", "php-cs-fixer"],
        default_command="phpcbf --standard=PSR12",
        is_formatter=True,
        builder=build_phpcbf,
        builders={"php-cs-fixer": build_php_cs_fixer},
        local_bin=COMPOSER_VENDOR_BIN,
    ),
    ToolDescriptor(
        name="css",
        extensions=[".css", ".scss", ".sass", ".less"],
        config_files=[
            ".stylelintrc",
            ".stylelintrc.js",
            ".stylelintrc.json",
            ".stylelintrc.yaml",
            ".stylelintrc.yml",
            "stylelint.config.js",
            "prettier.config.js",
        ],
        executables=["stylelint", "prettier"],
        default_command="prettier --write",
        is_formatter=True,
        builder=build_prettier,
        builders={"stylelint": build_stylelint},
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="html",
        extensions=[".html", ".htm"],
        config_files=[".prettierrc", ".prettierrc.json", ".prettierrc.yml", "prettier.config.js"],
        executables=["prettier"],
        default_command="prettier --write",
        is_formatter=True,
        builder=build_prettier,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="json",
        extensions=[".json", ".jsonc"],
        config_files=[".prettierrc", ".prettierrc.json", ".prettierrc.yaml"],
        executables=["prettier"],
        default_command="prettier --write",
        is_formatter=True,
        builder=build_prettier,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="yaml",
        extensions=[".yaml", ".yml"],
        config_files=[".prettierrc", ".prettierrc.yaml", ".prettierrc.yml"],
        executables=["prettier"],
        default_command="prettier --write",
        is_formatter=True,
        builder=build_prettier,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="markdown",
        extensions=[".md", ".markdown"],
        config_files=[".prettierrc", ".prettierrc.json"],
        executables=["prettier"],
        default_command="prettier --write",
        is_formatter=True,
        builder=build_prettier,
        local_bin=NODE_MODULES_BIN,
    ),
    ToolDescriptor(
        name="shell",
        extensions=[".sh", ".bash", ".zsh", ".fish"],
        config_files=[".shellcheckrc"],
        executables=["shellcheck"],
        default_command="shellcheck",
        builder=build_shellcheck,
    ),
    ToolDescriptor(
        name="sql",
        extensions=[".sql"],
        config_files=[".sqlfluff", ".sqlfluff.ini", ".sqlfluff.cfg", "pyproject.toml"],
        executables=["sqlfluff"],
        default_command="sqlfluff format",
        is_formatter=True,
        builder=build_sqlfluff,
    ),
    ToolDescriptor(
        name="dockerfile",
        extensions=["Dockerfile"],
        config_files=[".hadolint.yaml", ".hadolint.yml"],
        executables=["hadolint"],
        default_command="hadolint",
        builder=build_hadolint,
    ),
)

__all__ = ["BUILTIN_TOOLS", "ESLINT_CONFIG_FILES"]
