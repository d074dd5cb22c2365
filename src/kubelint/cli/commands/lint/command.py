# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....config_loader import FlagOverrides
from ....errors import KubeLintError
from ....logging import configure_debug_logging, detect_tty
from ....orchestration.pipeline import DEFAULT_OUTPUT_FILE, LintPipeline, LintRequest
from ....reporting.formatters import FormatType, build_formatters
from ...shared import build_cli_logger, exit_for_error, split_csv


def lint_command(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to lint. Use '-' to read from stdin.", show_default=False),
    ],
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file.", dir_okay=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
    output_format: Annotated[
        FormatType,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = FormatType.PLAIN,
    output_file: Annotated[
        Path,
        typer.Option("--output-file", help="File that receives a copy of the rendered output.", dir_okay=False),
    ] = DEFAULT_OUTPUT_FILE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable ANSI colour in output."),
    ] = False,
    add_all_built_in: Annotated[
        bool,
        typer.Option("--add-all-built-in", help="Enable all built-in checks."),
    ] = False,
    do_not_auto_add_defaults: Annotated[
        bool,
        typer.Option("--do-not-auto-add-defaults", help="Do not enable the default built-in checks."),
    ] = False,
    include: Annotated[
        list[str] | None,
        typer.Option("--include", help="Check to enable (repeatable, comma-separated)."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", help="Check to disable (repeatable, comma-separated)."),
    ] = None,
    ignore_paths: Annotated[
        list[str] | None,
        typer.Option("--ignore-paths", help="Glob of paths to skip (repeatable, comma-separated)."),
    ] = None,
) -> None:
    """Lint Kubernetes YAML files.

    Exits 0 when no lint errors are found, 1 when lint errors are found, and 2
    when the run itself fails.
    """

    logger = build_cli_logger(no_color=no_color)
    configure_debug_logging(verbose)
    flags = FlagOverrides(
        add_all_builtin=True if add_all_built_in else None,
        do_not_auto_add_defaults=True if do_not_auto_add_defaults else None,
        include=split_csv(include),
        exclude=split_csv(exclude),
        ignore_paths=split_csv(ignore_paths),
    )
    request = LintRequest(
        paths=tuple(paths),
        config_path=config,
        flags=flags,
        output_format=output_format.value,
        verbose=verbose,
        output_file=output_file,
    )
    pipeline = LintPipeline(
        formatters=build_formatters(color=not no_color and detect_tty("stdout")),
        warn=logger.warn,
    )
    try:
        pipeline.run(request)
    except KubeLintError as exc:
        exit_for_error(logger, exc)


__all__ = ["lint_command"]
