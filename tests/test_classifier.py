# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for extension-based tool classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintdispatch.resolution.classifier import classify, extension_of
from lintdispatch.tools.registry import build_default_registry

REGISTRY = build_default_registry()


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("main.py", "python"),
        ("app.tsx", "typescript"),
        ("styles.scss", "css"),
        ("data.jsonc", "json"),
        ("query.sql", "sql"),
        ("deploy.sh", "shell"),
    ],
)
def test_classify_by_extension(filename: str, expected: str) -> None:
    tool = classify(Path("/repo/src") / filename, REGISTRY)

    assert tool is not None
    assert tool.name == expected


def test_classify_falls_back_to_lowercase_extension() -> None:
    tool = classify("/repo/README.MD", REGISTRY)

    assert tool is not None
    assert tool.name == "markdown"


def test_classify_matches_bare_filename() -> None:
    tool = classify("/repo/Dockerfile", REGISTRY)

    assert tool is not None
    assert tool.name == "dockerfile"


@pytest.mark.parametrize("name", ["dockerfile", "DOCKERFILE", "DockerFile"])
def test_bare_filename_matches_case_insensitively(name: str) -> None:
    tool = classify(f"/repo/{name}", REGISTRY)

    assert tool is not None
    assert tool.name == "dockerfile"


def test_uppercase_extension_matches_case_insensitively() -> None:
    tool = classify("/repo/SCRIPT.SH", REGISTRY)

    assert tool is not None
    assert tool.name == "shell"


def test_unknown_extension_is_unclassified() -> None:
    assert classify("/repo/notes.txt", REGISTRY) is None
    assert classify("/repo/Makefile", REGISTRY) is None


def test_extension_uses_last_dot() -> None:
    assert extension_of("/repo/archive.tar.gz") == ".gz"
    assert extension_of("/repo/.bashrc") == ".bashrc"
    assert extension_of("/repo/Dockerfile") == ""


def test_dotfile_is_not_classified_by_basename() -> None:
    assert classify("/repo/.bash", REGISTRY) is not None
    assert classify("/repo/.prettierrc", REGISTRY) is None
