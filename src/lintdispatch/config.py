# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and layered loading for lintdispatch."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    ALWAYS_EXCLUDE_DIRS,
    DEFAULT_FILE_DELIMITER,
    PROJECT_CONFIG_FILENAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class DispatchConfig(BaseModel):
    """Runtime settings for a dispatcher run.

    ``delimiter`` only joins the files shown in each batch announcement; the
    process itself always receives every file as a separate argument.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    exclude_dirs: frozenset[str] = Field(default_factory=lambda: frozenset(ALWAYS_EXCLUDE_DIRS))
    extra_excludes: frozenset[str] = Field(default_factory=frozenset)
    delimiter: str = DEFAULT_FILE_DELIMITER
    isolate_tools: bool = False
    dry_run: bool = False
    follow_symlinks: bool = False
    search_path: str | None = None

    @field_validator("delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("delimiter must not be empty")
        return value

    @property
    def excluded(self) -> frozenset[str]:
        """Return every directory name pruned during discovery."""

        return self.exclude_dirs | self.extra_excludes


class TomlConfigSource:
    """Load a configuration table from a TOML document."""

    def __init__(self, path: Path, *, section: tuple[str, ...] = ()) -> None:
        self.path = path
        self._section = section

    def load(self) -> Mapping[str, Any]:
        """Return the configured table, or an empty mapping when absent.

        Raises:
            ConfigError: If the document cannot be parsed.
        """

        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data: Any = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Unable to read configuration at {self.path}: {exc}") from exc
        for key in self._section:
            if not isinstance(data, MutableMapping):
                return {}
            data = data.get(key)
        if data is None:
            return {}
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self.path} must be a table")
        return dict(data)

    def describe(self) -> str:
        if self._section:
            return f"[{'.'.join(self._section)}] in {self.path}"
        return f"TOML configuration at {self.path}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.lintdispatch]`` within ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, section=(PYPROJECT_TOOL_KEY, PYPROJECT_SECTION_KEY))


def default_sources(root: Path, explicit: Path | None = None) -> list[TomlConfigSource]:
    """Return configuration sources for ``root`` in increasing precedence."""

    sources: list[TomlConfigSource] = [
        PyProjectConfigSource(root / "pyproject.toml"),
        TomlConfigSource(root / PROJECT_CONFIG_FILENAME),
    ]
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file {explicit} does not exist")
        sources.append(TomlConfigSource(explicit))
    return sources


def load_config(
    root: Path,
    *,
    explicit: Path | None = None,
    sources: Iterable[TomlConfigSource] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> DispatchConfig:
    """Merge configuration sources over the defaults.

    Args:
        root: Directory whose ``pyproject.toml`` and ``.lintdispatch.toml`` are read.
        explicit: Optional configuration file taking precedence over both.
        sources: Replacement source list, mainly for tests.
        overrides: Final values (typically CLI flags) applied last.

    Returns:
        DispatchConfig: Validated configuration.

    Raises:
        ConfigError: If any source is unreadable or carries invalid values.
    """

    merged: dict[str, Any] = {}
    for source in sources if sources is not None else default_sources(root, explicit):
        fragment = source.load()
        merged.update(_normalise_keys(fragment))
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return DispatchConfig(**merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _normalise_keys(fragment: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in fragment.items()}


__all__ = [
    "ConfigError",
    "DispatchConfig",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
