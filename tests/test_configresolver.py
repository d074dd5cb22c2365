# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for enabled-check resolution and custom check loading."""

from __future__ import annotations

from typing import Any

import pytest

from kubelint.checks import CheckRegistry, load_builtin_checks
from kubelint.config import Config
from kubelint.configresolver import get_enabled_checks_and_validate, load_custom_checks_into
from kubelint.errors import RegistryError

DEFAULTS = frozenset(
    {
        "latest-tag",
        "no-read-only-root-fs",
        "privileged-container",
        "run-as-non-root",
        "unset-cpu-requirements",
        "unset-memory-requirements",
    },
)


def _resolve(data: dict[str, Any]) -> frozenset[str]:
    config = Config.model_validate(data)
    registry = CheckRegistry()
    load_builtin_checks(registry)
    load_custom_checks_into(config, registry)
    return get_enabled_checks_and_validate(config, registry)


def test_defaults_enable_default_builtins() -> None:
    assert _resolve({}) == DEFAULTS


def test_add_all_builtin_enables_every_builtin() -> None:
    enabled = _resolve({"checks": {"addAllBuiltIn": True}})

    assert DEFAULTS < enabled
    assert {"required-label-owner", "required-annotation-email"} <= enabled


def test_include_and_exclude_adjust_the_defaults() -> None:
    enabled = _resolve({"checks": {"include": ["required-label-owner"], "exclude": ["latest-tag"]}})

    assert enabled == (DEFAULTS - {"latest-tag"}) | {"required-label-owner"}


def test_do_not_auto_add_defaults_can_leave_nothing_enabled() -> None:
    assert _resolve({"checks": {"doNotAutoAddDefaults": True}}) == frozenset()


def test_custom_checks_are_enabled() -> None:
    enabled = _resolve(
        {
            "checks": {"doNotAutoAddDefaults": True},
            "customChecks": [{"name": "team-label", "template": "required-label", "params": {"key": "team"}}],
        },
    )

    assert enabled == frozenset({"team-label"})


@pytest.mark.parametrize(
    ("checks", "message"),
    [
        ({"include": ["nope"]}, 'enabled check "nope" not found'),
        ({"exclude": ["nope"]}, 'excluded check "nope" not found'),
        ({"include": ["latest-tag"], "exclude": ["latest-tag"]}, "both included and excluded"),
    ],
)
def test_invalid_enablement_raises(checks: dict[str, Any], message: str) -> None:
    with pytest.raises(RegistryError, match=message):
        _resolve({"checks": checks})


def test_custom_check_colliding_with_builtin_raises() -> None:
    with pytest.raises(RegistryError, match="failed to load custom check 'latest-tag'"):
        _resolve({"customChecks": [{"name": "latest-tag", "template": "latest-tag"}]})
