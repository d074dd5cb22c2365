# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version command."""

from __future__ import annotations

import typer
from typer import Typer

from .... import __version__

__all__ = ["register", "version_command"]


def version_command() -> None:
    """Print the kubelint version."""

    typer.echo(__version__)


def register(app: Typer) -> None:
    """Register the version command with the Typer ``app``."""

    app.command(name="version", help="Print the kubelint version.")(version_command)
