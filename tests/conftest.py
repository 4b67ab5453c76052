# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from helpers.fakes import RecordingLogger, write_executable
from lintdispatch.cli.shared import console_for


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    """Drop cached Rich consoles so each test starts from fresh TTY detection."""

    console_for.cache_clear()


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Return an isolated directory used as the executable search path."""

    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_executable(bin_dir: Path) -> Callable[..., Path]:
    """Return a factory writing fake executables into :func:`bin_dir` by default."""

    def _factory(
        name: str,
        *,
        exit_code: int = 0,
        log: Path | None = None,
        directory: Path | None = None,
    ) -> Path:
        return write_executable(directory or bin_dir, name, exit_code=exit_code, log=log)

    return _factory


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
