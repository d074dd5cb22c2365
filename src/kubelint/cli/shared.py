# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, option parsing)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NoReturn

import typer

from ..errors import KubeLintError
from ..logging import detect_tty
from ..logging import fail as core_fail
from ..logging import warn as core_warn


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation flags."""

    use_color: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message to stderr.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message to stderr.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_color=self.use_color)


def build_cli_logger(*, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the presentation preferences.

    Args:
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger writing to stderr.
    """

    return CLILogger(use_color=not no_color and detect_tty("stderr"))


def exit_for_error(logger: CLILogger, exc: KubeLintError) -> NoReturn:
    """Log ``exc`` and terminate the command with its exit status.

    Args:
        logger: CLI logger used for the error message.
        exc: Pipeline error carrying the exit status.

    Raises:
        typer.Exit: Always, with ``exc.exit_code``.
    """

    logger.fail(str(exc))
    raise typer.Exit(code=exc.exit_code) from exc


def split_csv(values: Iterable[str] | None) -> tuple[str, ...] | None:
    """Flatten repeatable, comma-separated option values.

    Args:
        values: Raw option values, e.g. ``["a,b", "c"]``.

    Returns:
        tuple[str, ...] | None: ``("a", "b", "c")``, or ``None`` when no value
        was supplied.
    """

    if not values:
        return None
    items = tuple(item.strip() for value in values for item in value.split(",") if item.strip())
    return items or None


__all__ = ["CLILogger", "build_cli_logger", "exit_for_error", "split_csv"]
