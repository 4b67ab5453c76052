# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Group resolved files into batches keyed by their configuration."""

from __future__ import annotations

from collections.abc import Iterator

from .command import CommandLine
from .models import Batch, ResolvedTarget


def batch_key(target: ResolvedTarget, *, isolate_tools: bool = False) -> str:
    """Return the accumulation key for ``target``.

    By default the key is the configuration path alone, so every file without
    a configuration shares one key regardless of its tool. ``isolate_tools``
    prefixes the tool name to keep families apart.
    """

    if isolate_tools and target.tool is not None:
        return f"{target.tool.name}\0{target.config_path}"
    return target.config_path


class BatchAccumulator:
    """Ordered mapping from key to :class:`Batch`.

    The first ``add`` for a key fixes the batch command; later adds with that
    key only append their file. Iteration follows first-seen key order.
    """

    def __init__(self) -> None:
        self._batches: dict[str, Batch] = {}

    def add(self, file: str, key: str, command: CommandLine, *, config_path: str | None = None) -> Batch:
        """Append ``file`` to the batch for ``key``, creating it when new.

        Args:
            file: File path to include in the batch.
            key: Accumulation key (normally the resolved configuration path).
            command: Command used only when the batch is created.
            config_path: Configuration recorded on a new batch; defaults to ``key``.

        Returns:
            Batch: The batch that received ``file``.
        """

        batch = self._batches.get(key)
        if batch is None:
            batch = Batch(key=key, command=command, config_path=key if config_path is None else config_path)
            self._batches[key] = batch
        batch.files.append(file)
        return batch

    def add_target(self, target: ResolvedTarget, *, isolate_tools: bool = False) -> Batch:
        """Add a resolved target using :func:`batch_key`.

        Raises:
            ValueError: If ``target`` carries no command.
        """

        if target.command is None:
            raise ValueError(f"{target.path} has no resolved command")
        return self.add(
            str(target.path),
            batch_key(target, isolate_tools=isolate_tools),
            target.command,
            config_path=target.config_path,
        )

    def batches(self) -> list[Batch]:
        """Return batches in first-seen key order."""

        return list(self._batches.values())

    def __iter__(self) -> Iterator[Batch]:
        return iter(self._batches.values())

    def __len__(self) -> int:
        return len(self._batches)

    def __contains__(self, key: object) -> bool:
        return key in self._batches


__all__ = ["BatchAccumulator", "batch_key"]
