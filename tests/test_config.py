# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintdispatch.config import (
    ConfigError,
    DispatchConfig,
    PyProjectConfigSource,
    TomlConfigSource,
    default_sources,
    load_config,
)
from lintdispatch.constants import ALWAYS_EXCLUDE_DIRS


def test_defaults_without_project_files(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == DispatchConfig()
    assert config.excluded == ALWAYS_EXCLUDE_DIRS
    assert config.delimiter == " "
    assert not config.isolate_tools


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.lintdispatch]\nisolate-tools = true\nextra-excludes = ["dist"]\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.isolate_tools
    assert "dist" in config.excluded


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.lintdispatch]\ndelimiter = ","\n', encoding="utf-8")
    (tmp_path / ".lintdispatch.toml").write_text('delimiter = ";"\n', encoding="utf-8")

    assert load_config(tmp_path).delimiter == ";"


def test_explicit_file_and_overrides_take_precedence(tmp_path: Path) -> None:
    (tmp_path / ".lintdispatch.toml").write_text("dry_run = false\n", encoding="utf-8")
    explicit = tmp_path / "custom.toml"
    explicit.write_text('dry_run = true\ndelimiter = ","\n', encoding="utf-8")

    config = load_config(tmp_path, explicit=explicit, overrides={"delimiter": "|", "isolate_tools": None})

    assert config.dry_run
    assert config.delimiter == "|"
    assert not config.isolate_tools


def test_missing_explicit_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        default_sources(tmp_path, tmp_path / "absent.toml")


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".lintdispatch.toml").write_text("colour = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_empty_delimiter_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="delimiter"):
        load_config(tmp_path, overrides={"delimiter": ""})


def test_malformed_toml_is_reported(tmp_path: Path) -> None:
    broken = tmp_path / ".lintdispatch.toml"
    broken.write_text("dry_run = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unable to read configuration"):
        TomlConfigSource(broken).load()


def test_pyproject_without_section_is_empty(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.black]\nline-length = 100\n', encoding="utf-8")

    source = PyProjectConfigSource(pyproject)

    assert source.load() == {}
    assert source.describe() == f"[tool.lintdispatch] in {pyproject}"
