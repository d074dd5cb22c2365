# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check definitions, templates, and the check registry."""

from __future__ import annotations

from .base import CheckDefinition, CheckFunc, CheckSpec, ObjectKindsScope
from .builtins import BUILTIN_CHECKS, load_builtin_checks
from .registry import CheckRegistry
from .templates import TEMPLATES, CheckTemplate, TemplateParameter, compile_check

__all__ = [
    "BUILTIN_CHECKS",
    "TEMPLATES",
    "CheckDefinition",
    "CheckFunc",
    "CheckRegistry",
    "CheckSpec",
    "CheckTemplate",
    "ObjectKindsScope",
    "TemplateParameter",
    "compile_check",
    "load_builtin_checks",
]
