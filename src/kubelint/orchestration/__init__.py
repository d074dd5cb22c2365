# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint pipeline orchestration."""

from __future__ import annotations

from .pipeline import (
    DEFAULT_OUTPUT_FILE,
    NO_CHECKS_WARNING,
    NO_OBJECTS_WARNING,
    LintPipeline,
    LintRequest,
    PipelineOutcome,
    PipelineStatus,
    run_lint,
)

__all__ = [
    "DEFAULT_OUTPUT_FILE",
    "NO_CHECKS_WARNING",
    "NO_OBJECTS_WARNING",
    "LintPipeline",
    "LintRequest",
    "PipelineOutcome",
    "PipelineStatus",
    "run_lint",
]
