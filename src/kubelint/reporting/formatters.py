# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatter registry mapping output-format names to renderers."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TextIO

from ..errors import FormatError
from ..models import RunResult
from .emitters import PlainTemplate, format_json, format_sarif

FormatFunc = Callable[[TextIO, RunResult], None]


class FormatType(str, Enum):
    """Supported output formats."""

    JSON = "json"
    SARIF = "sarif"
    PLAIN = "plain"


class Formatters(Mapping[FormatType, FormatFunc]):
    """Immutable mapping from format type to renderer."""

    def __init__(self, formatters: Mapping[FormatType, FormatFunc]) -> None:
        """Freeze ``formatters`` into the registry.

        Args:
            formatters: Renderers keyed by format type.
        """

        self._formatters: Mapping[FormatType, FormatFunc] = MappingProxyType(dict(formatters))

    def formatter_by_type(self, name: str | FormatType) -> FormatFunc:
        """Return the renderer registered for ``name``.

        Args:
            name: Format identifier such as ``"json"``.

        Returns:
            FormatFunc: Renderer writing a run result to a sink.

        Raises:
            FormatError: If ``name`` is not a registered format.
        """

        try:
            format_type = FormatType(name)
            return self._formatters[format_type]
        except (ValueError, KeyError) as exc:
            enabled = ", ".join(self.enabled_formatters())
            raise FormatError(f'unknown format "{name}" (available: {enabled})') from exc

    def enabled_formatters(self) -> list[str]:
        """Return the registered format names, sorted."""

        return sorted(format_type.value for format_type in self._formatters)

    def __getitem__(self, key: FormatType) -> FormatFunc:
        return self._formatters[key]

    def __iter__(self) -> Iterator[FormatType]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)


def build_formatters(*, color: bool = False) -> Formatters:
    """Return the lint command's formatter registry.

    Args:
        color: Whether the plain renderer emits ANSI colour. The choice is made
            once so every sink receives the same bytes.

    Returns:
        Formatters: Registry covering JSON, SARIF, and plain output.
    """

    plain = PlainTemplate(color=color)
    return Formatters(
        {
            FormatType.JSON: format_json,
            FormatType.SARIF: format_sarif,
            FormatType.PLAIN: plain.execute,
        },
    )


__all__ = ["FormatFunc", "FormatType", "Formatters", "build_formatters"]
