# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from ..config import ConfigError, DispatchConfig, load_config
from ..dispatcher import Dispatcher
from ..models import DispatchResult
from .shared import CLILogger, build_cli_logger

app = typer.Typer(
    help="Run the nearest configured linter or formatter over each file.",
    add_completion=False,
    no_args_is_help=False,
)


def _load_runtime_config(
    *,
    config_file: Path | None,
    dry_run: bool,
    isolate_tools: bool,
    exclude: list[str],
) -> DispatchConfig:
    """Return configuration from project files with CLI flags applied last."""

    overrides: dict[str, Any] = {}
    if dry_run:
        overrides["dry_run"] = True
    if isolate_tools:
        overrides["isolate_tools"] = True
    try:
        config = load_config(Path.cwd(), explicit=config_file, overrides=overrides)
        if exclude:
            config.extra_excludes = config.extra_excludes | frozenset(exclude)
    except (ValueError, ConfigError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _summarise(result: DispatchResult, logger: CLILogger) -> None:
    for outcome in result.results:
        if outcome.failed:
            logger.debug(f"batch config={outcome.batch.config_path or '-'} exit={outcome.exit_code}")
    if result.failed:
        failed = sum(1 for outcome in result.results if outcome.failed)
        logger.status("fail", f"{failed} batch(es) failed; exit code {result.exit_code}")
    elif result.results:
        logger.status("ok", f"{len(result.results)} batch(es) completed")
    else:
        logger.status("info", "No files matched a registered tool")


@app.command()
def main(
    paths: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Files or directories to process (default: current directory)."),
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print batches without executing them.")] = False,
    isolate_tools: Annotated[
        bool,
        typer.Option("--isolate-tools", help="Never merge different tool families into one batch."),
    ] = False,
    exclude: Annotated[
        Optional[list[str]],
        typer.Option("--exclude", "-e", help="Additional directory name to skip while walking."),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config-file", "-c", help="Explicit lintdispatch TOML configuration."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show resolution details.")] = False,
) -> None:
    """Dispatch PATHS to their linters and exit with the last failing batch's code."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    config = _load_runtime_config(
        config_file=config_file,
        dry_run=dry_run,
        isolate_tools=isolate_tools,
        exclude=exclude or [],
    )
    dispatcher = Dispatcher(config=config, logger=logger)
    result = dispatcher.run([str(path) for path in paths or []])
    _summarise(result, logger)
    raise typer.Exit(code=result.exit_code)


__all__ = ["app", "main"]
