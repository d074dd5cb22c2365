# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity levels attached to check definitions."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


__all__ = ["Severity"]
