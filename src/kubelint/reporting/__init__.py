# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for rendering lint results."""

from __future__ import annotations

from .emitters import PlainTemplate, format_json, format_sarif, render_json, render_sarif
from .formatters import FormatFunc, Formatters, FormatType, build_formatters

__all__ = [
    "FormatFunc",
    "FormatType",
    "Formatters",
    "PlainTemplate",
    "build_formatters",
    "format_json",
    "format_sarif",
    "render_json",
    "render_sarif",
]
