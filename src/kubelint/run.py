# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run enabled checks against lint contexts and aggregate the reports."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import Final

from . import __version__
from .checks.base import CheckDefinition
from .checks.registry import CheckRegistry
from .errors import ExecutionError
from .lintcontext import LintContext
from .models import ChecksStatus, LintObject, Report, RunResult, Summary

IGNORE_CHECK_ANNOTATION_PREFIX: Final[str] = "ignore-check.kube-linter.io/"
IGNORE_ALL_ANNOTATION: Final[str] = "kube-linter.io/ignore-all"

_LOG = logging.getLogger(__name__)


def run(
    contexts: Sequence[LintContext],
    registry: CheckRegistry,
    enabled_checks: Collection[str],
    *,
    version: str = __version__,
) -> RunResult:
    """Apply every enabled check to every object of every context.

    Reports are ordered by context, then object load order, then check name.

    Args:
        contexts: Lint contexts produced by the input loader.
        registry: Registry holding the enabled checks.
        enabled_checks: Names of the checks to run.
        version: Tool version recorded in the summary.

    Returns:
        RunResult: Reports plus a summary of the run.

    Raises:
        ExecutionError: If an enabled check is not registered or a check
            raises while running.
    """

    checks = [_lookup(registry, name) for name in sorted(enabled_checks)]
    reports: list[Report] = []
    object_count = 0
    invalid_count = 0
    for context in contexts:
        invalid_count += len(context.invalid_objects())
        for obj in context.objects():
            object_count += 1
            for check in checks:
                if not check.applies_to(obj) or is_ignored(obj, check.name):
                    continue
                reports.extend(_run_check(check, obj))

    summary = Summary(
        checks_status=ChecksStatus.FAILED if reports else ChecksStatus.PASSED,
        kubelint_version=version,
        objects=object_count,
        invalid_objects=invalid_count,
        enabled_checks=len(checks),
        reports=len(reports),
    )
    return RunResult(reports=tuple(reports), summary=summary)


def is_ignored(obj: LintObject, check_name: str) -> bool:
    """Return ``True`` when ``obj`` opts out of ``check_name`` via annotations."""

    annotations = obj.annotations
    return IGNORE_ALL_ANNOTATION in annotations or f"{IGNORE_CHECK_ANNOTATION_PREFIX}{check_name}" in annotations


def _lookup(registry: CheckRegistry, name: str) -> CheckDefinition:
    check = registry.try_get(name)
    if check is None:
        raise ExecutionError(f'enabled check "{name}" is not registered')
    return check


def _run_check(check: CheckDefinition, obj: LintObject) -> list[Report]:
    _LOG.debug("running check=%s object=%s", check.name, obj.k8s_object_name)
    try:
        diagnostics = check.func(obj)
    except Exception as exc:
        raise ExecutionError(
            f'check "{check.name}" failed on {obj.metadata.file_path} ({obj.k8s_object_name}): {exc}',
        ) from exc
    return [
        Report(diagnostic=diagnostic, check=check.name, remediation=check.remediation, object=obj)
        for diagnostic in diagnostics
    ]


__all__ = ["IGNORE_ALL_ANNOTATION", "IGNORE_CHECK_ANNOTATION_PREFIX", "is_ignored", "run"]
