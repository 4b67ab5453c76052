# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dispatch driver: resolve inputs into batches and run one process per batch."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .batching import BatchAccumulator
from .config import DispatchConfig
from .constants import GENERIC_FAILURE_EXIT_CODE
from .discovery import UnreadablePathError, expand_path
from .models import Batch, BatchResult, DispatchResult
from .process import CommandOptions, run_command
from .protocols import CommandRunner, DispatchLogger
from .resolution import ExecutableResolver, TargetResolver
from .tools.registry import ToolRegistry, build_default_registry

DEFAULT_INPUT = "."


class _SilentLogger:
    def announce(self, command: str, config_path: str, files: str) -> None:
        del command, config_path, files

    def unreadable(self, path: str, reason: str) -> None:
        del path, reason

    def spawn_failed(self, program: str, reason: str) -> None:
        del program, reason

    def debug(self, message: str) -> None:
        del message


class Dispatcher:
    """Sequential lint/format dispatcher.

    Every input is fully resolved before the next one starts, and batches run
    one after another once resolution is complete. The final exit code is the
    code of the last batch that failed.
    """

    def __init__(
        self,
        *,
        registry: ToolRegistry | None = None,
        config: DispatchConfig | None = None,
        logger: DispatchLogger | None = None,
        runner: CommandRunner = run_command,
    ) -> None:
        self._config = config or DispatchConfig()
        self._registry = registry or build_default_registry()
        self._resolver = TargetResolver(
            self._registry,
            ExecutableResolver(search_path=self._config.search_path),
        )
        self._logger: DispatchLogger = logger or _SilentLogger()
        self._runner = runner

    @property
    def config(self) -> DispatchConfig:
        return self._config

    def collect(self, paths: Sequence[str | Path], *, skipped: list[str] | None = None) -> list[Batch]:
        """Resolve ``paths`` into batches in first-seen configuration order.

        Args:
            paths: Input files or directories; empty means the current directory.
            skipped: Optional list receiving inputs that could not be read.

        Returns:
            list[Batch]: Finalised batches ready for execution.
        """

        accumulator = BatchAccumulator()

        def _report_unreadable(path: str, exc: OSError) -> None:
            self._logger.unreadable(path, exc.strerror or str(exc))
            if skipped is not None:
                skipped.append(path)

        for raw in paths or (DEFAULT_INPUT,):
            try:
                for file in expand_path(raw, self._config, on_error=_report_unreadable):
                    self._add_file(accumulator, file)
            except UnreadablePathError as exc:
                self._logger.unreadable(exc.path, exc.reason)
                if skipped is not None:
                    skipped.append(exc.path)
        return accumulator.batches()

    def _add_file(self, accumulator: BatchAccumulator, file: Path) -> None:
        target = self._resolver.resolve(file)
        if target is None:
            self._logger.debug(f"skip file={file}")
            return
        batch = accumulator.add_target(target, isolate_tools=self._config.isolate_tools)
        self._logger.debug(f"batch file={file} config={target.config_path or '-'} command={batch.command.render()}")

    def execute(self, batches: Sequence[Batch]) -> list[BatchResult]:
        """Run ``batches`` sequentially, continuing past failures."""

        return [self.execute_batch(batch) for batch in batches]

    def execute_batch(self, batch: Batch) -> BatchResult:
        """Run one batch and return its exit status.

        A process that cannot be started, or that is killed by a signal, is
        recorded with :data:`GENERIC_FAILURE_EXIT_CODE`.
        """

        self._announce(batch)
        if self._config.dry_run:
            return BatchResult(batch=batch, exit_code=0, started=False)
        options = CommandOptions(env=batch.command.env, search_path=self._config.search_path)
        try:
            completed = self._runner(batch.argv(), options=options)
        except OSError as exc:
            self._logger.spawn_failed(batch.command.program, exc.strerror or str(exc))
            return BatchResult(batch=batch, exit_code=GENERIC_FAILURE_EXIT_CODE, started=False)
        code = completed.returncode
        if code < 0:
            code = GENERIC_FAILURE_EXIT_CODE
        return BatchResult(batch=batch, exit_code=code)

    def _announce(self, batch: Batch) -> None:
        self._logger.announce(
            batch.command.render(),
            batch.config_path,
            self._config.delimiter.join(batch.files),
        )

    def run(self, paths: Sequence[str | Path]) -> DispatchResult:
        """Resolve ``paths``, execute every batch, and aggregate the outcome."""

        skipped: list[str] = []
        batches = self.collect(paths, skipped=skipped)
        results = self.execute(batches)
        return DispatchResult(results=results, skipped=skipped)


__all__ = ["DEFAULT_INPUT", "Dispatcher"]
