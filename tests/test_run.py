# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the check run engine."""

from __future__ import annotations

from typing import Any

import pytest

from kubelint.checks import CheckRegistry, CheckSpec, compile_check, load_builtin_checks
from kubelint.checks.base import CheckDefinition
from kubelint.errors import ExecutionError
from kubelint.lintcontext import LintContext
from kubelint.models import ChecksStatus, InvalidObject, LintObject, ObjectMetadata
from kubelint.run import IGNORE_ALL_ANNOTATION, run


def _object(name: str, kind: str = "Service", annotations: dict[str, str] | None = None) -> LintObject:
    manifest: dict[str, Any] = {"apiVersion": "v1", "kind": kind, "metadata": {"name": name}}
    if annotations:
        manifest["metadata"]["annotations"] = annotations
    return LintObject(metadata=ObjectMetadata(file_path=f"{name}.yaml"), k8s_object=manifest)


def _registry() -> CheckRegistry:
    registry = CheckRegistry()
    load_builtin_checks(registry)
    return registry


def test_run_orders_reports_by_context_object_and_check() -> None:
    contexts = [
        LintContext("first", (_object("a"), _object("b"))),
        LintContext("second", (_object("c"),)),
    ]

    result = run(contexts, _registry(), {"required-label-owner", "required-annotation-email"}, version="1.2.3")

    assert [(report.object.name, report.check) for report in result.reports] == [
        ("a", "required-annotation-email"),
        ("a", "required-label-owner"),
        ("b", "required-annotation-email"),
        ("b", "required-label-owner"),
        ("c", "required-annotation-email"),
        ("c", "required-label-owner"),
    ]
    assert result.summary.checks_status is ChecksStatus.FAILED
    assert result.summary.kubelint_version == "1.2.3"
    assert result.summary.objects == 3
    assert result.summary.enabled_checks == 2
    assert result.summary.reports == 6


def test_run_skips_objects_outside_check_scope() -> None:
    contexts = [LintContext("svc", (_object("svc"),))]

    result = run(contexts, _registry(), {"latest-tag", "privileged-container"})

    assert result.reports == ()
    assert result.summary.checks_status is ChecksStatus.PASSED


def test_ignore_annotations_suppress_reports() -> None:
    contexts = [
        LintContext(
            "svc",
            (
                _object("skip-one", annotations={"ignore-check.kube-linter.io/required-label-owner": "ok"}),
                _object("skip-all", annotations={IGNORE_ALL_ANNOTATION: ""}),
            ),
        ),
    ]

    result = run(contexts, _registry(), {"required-label-owner", "required-annotation-email"})

    assert [(report.object.name, report.check) for report in result.reports] == [
        ("skip-one", "required-annotation-email"),
    ]


def test_invalid_objects_are_counted_not_checked() -> None:
    invalid = InvalidObject(metadata=ObjectMetadata(file_path="bad.yaml"), load_err="boom")
    contexts = [LintContext("bad", (), (invalid,))]

    result = run(contexts, _registry(), {"required-label-owner"})

    assert result.reports == ()
    assert result.summary.invalid_objects == 1


def test_report_carries_check_remediation() -> None:
    registry = _registry()
    result = run([LintContext("svc", (_object("svc"),))], registry, {"required-label-owner"})

    (report,) = result.reports
    assert report.remediation == registry["required-label-owner"].remediation
    assert report.diagnostic.message == 'no label matching "owner=<any>" found'


def test_unregistered_enabled_check_raises() -> None:
    with pytest.raises(ExecutionError, match='"ghost" is not registered'):
        run([], _registry(), {"ghost"})


def test_check_failure_raises_execution_error() -> None:
    def explode(_obj: LintObject) -> list:
        raise ValueError("kaboom")

    registry = CheckRegistry()
    base = compile_check(CheckSpec(name="boom", template="required-label", params={"key": "x"}))
    registry.register(CheckDefinition(spec=base.spec, func=explode, object_kinds=("Any",)))

    with pytest.raises(ExecutionError, match="kaboom"):
        run([LintContext("svc", (_object("svc"),))], registry, {"boom"})
