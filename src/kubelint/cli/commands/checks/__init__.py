# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Check and template listing commands."""

from __future__ import annotations

from typer import Typer

from ...typer_ext import create_typer
from .command import list_checks_command, list_templates_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the ``checks`` and ``templates`` command groups on ``app``.

    Args:
        app: Typer application receiving the command groups.
    """

    checks_app = create_typer(help="View information about checks.")
    checks_app.command(name="list", help="List checks.")(list_checks_command)
    app.add_typer(checks_app, name="checks")

    templates_app = create_typer(help="View information about check templates.")
    templates_app.command(name="list", help="List check templates.")(list_templates_command)
    app.add_typer(templates_app, name="templates")
