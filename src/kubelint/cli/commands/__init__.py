# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

from typer import Typer

from . import checks, lint, version

__all__ = ["register_commands"]


def register_commands(app: Typer) -> None:
    """Register every built-in CLI command on ``app``.

    Args:
        app: Typer application receiving command registrations.
    """

    lint.register(app)
    checks.register(app)
    version.register(app)
