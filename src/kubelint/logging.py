# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour support.

Every helper in this module writes to the diagnostic stream (stderr). The
primary stream (stdout) is reserved for rendered lint results.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console
from rich.text import Text

ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "red": "\033[31;1m",
    "yellow": "\033[33;1m",
}

LOGGER_NAME = "kubelint"


def detect_tty(stream: Literal["stdout", "stderr"] = "stdout") -> bool:
    """Return ``True`` when the selected standard stream is backed by a terminal.

    Args:
        stream: Name of the standard stream to inspect.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    target = sys.stdout if stream == "stdout" else sys.stderr
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


def colorize(text: str, code: str, enable: bool) -> str:
    """Wrap ``text`` in ANSI colour codes when ``enable`` is truthy.

    Unlike console output, the decision is never re-evaluated per stream so the
    same rendered text can be written to several sinks.

    Args:
        text: Text to colour.
        code: Key into :data:`ANSI`.
        enable: Flag indicating whether colour output is requested.

    Returns:
        str: Colourised text when enabled; otherwise the original text.
    """

    if not enable:
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


@lru_cache(maxsize=2)
def get_console(*, color: bool) -> Console:
    """Return a cached stderr console.

    Args:
        color: ``True`` when ANSI colour output should be enabled.

    Returns:
        Console: Console bound to ``sys.stderr``.
    """

    return Console(
        stderr=True,
        no_color=not color,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def _print_line(msg: str, *, style: str, use_color: bool | None) -> None:
    color_enabled = detect_tty("stderr") if use_color is None else use_color
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    get_console(color=color_enabled).print(text)


def warn(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a warning message prefixed with ``Warning:``."""

    _print_line(f"Warning: {msg}", style="yellow", use_color=use_color)


def fail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an error message prefixed with ``Error:``."""

    _print_line(f"Error: {msg}", style="red", use_color=use_color)


def configure_debug_logging(enabled: bool) -> None:
    """Route ``kubelint`` debug records to stderr when ``enabled``.

    Args:
        enabled: Whether debug records should be emitted.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not enabled:
        logger.setLevel(logging.WARNING)
        return
    logger.setLevel(logging.DEBUG)
    if not any(getattr(handler, "_kubelint_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
        handler._kubelint_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


__all__ = [
    "ANSI",
    "LOGGER_NAME",
    "colorize",
    "configure_debug_logging",
    "detect_tty",
    "fail",
    "get_console",
    "warn",
]
