# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``checks`` and ``templates`` listing commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....checks.builtins import load_builtin_checks
from ....checks.registry import CheckRegistry
from ....checks.templates import TEMPLATES
from ....config_loader import load_config
from ....configresolver import load_custom_checks_into
from ....errors import KubeLintError
from ...shared import build_cli_logger, exit_for_error
from .rendering import ListFormat, render_checks, render_templates


def list_checks_command(
    output_format: Annotated[
        ListFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = ListFormat.PLAIN,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file whose custom checks are listed too.", dir_okay=False),
    ] = None,
) -> None:
    """List every builtin and custom check."""

    logger = build_cli_logger()
    try:
        cfg = load_config(path=config)
        registry = CheckRegistry()
        load_builtin_checks(registry)
        load_custom_checks_into(cfg, registry)
    except KubeLintError as exc:
        exit_for_error(logger, exc)
    typer.echo(render_checks(registry.checks(), output_format))


def list_templates_command(
    output_format: Annotated[
        ListFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = ListFormat.PLAIN,
) -> None:
    """List the templates custom checks can be built from."""

    templates = [TEMPLATES[key] for key in sorted(TEMPLATES)]
    typer.echo(render_templates(templates, output_format))


__all__ = ["list_checks_command", "list_templates_command"]
