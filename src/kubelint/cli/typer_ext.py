# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application and command classes that list options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from click.core import Argument, Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyperCommand(TyperCommand):
    """Command whose ``--help`` lists arguments first, then options by long name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Write the ``Arguments`` and ``Options`` help sections.

        Args:
            ctx: Click context for the invocation.
            formatter: Help formatter receiving the definition lists.
        """

        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if isinstance(param, Argument):
                arguments.append(record)
            else:
                options.append((_primary_option_name(param), record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            options.sort(key=lambda item: item[0])
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in options])


class SortedTyperGroup(TyperGroup):
    """Group that builds :class:`SortedTyperCommand` subcommands."""

    command_class = SortedTyperCommand


class SortedTyper(typer.Typer):
    """Typer application registering every command as a :class:`SortedTyperCommand`."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return Typer's registration decorator with the sorted command class."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` with kubelint's defaults.

    Help is rendered by click rather than rich so the sorted option listing is
    what users see.
    """

    kwargs.setdefault("no_args_is_help", True)
    kwargs.setdefault("add_completion", False)
    kwargs.setdefault("rich_markup_mode", None)
    return SortedTyper(**kwargs)


def _primary_option_name(param: Parameter) -> str:
    """Return the lowercase long option name of ``param`` without dashes."""

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    candidate = long_names[0] if long_names else (names[0] if names else param.name or "")
    return candidate.lstrip("-").lower()


__all__ = ["SortedTyper", "SortedTyperCommand", "SortedTyperGroup", "create_typer"]
