# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the check registry and builtin catalogue."""

from __future__ import annotations

import pytest

from kubelint.checks import BUILTIN_CHECKS, CheckRegistry, CheckSpec, compile_check, load_builtin_checks
from kubelint.errors import RegistryError


def _check(name: str, *, builtin: bool = False):
    spec = CheckSpec(name=name, template="required-label", params={"key": "team"})
    return compile_check(spec, builtin=builtin)


def test_registry_rejects_duplicate_names() -> None:
    registry = CheckRegistry()
    registry.register(_check("team-label"))

    with pytest.raises(RegistryError, match='duplicate check name: "team-label"'):
        registry.register(_check("team-label"))

    assert len(registry) == 1


def test_registry_lookup_and_sorted_iteration() -> None:
    registry = CheckRegistry()
    registry.register(_check("zeta"))
    registry.register(_check("alpha", builtin=True))

    assert list(registry) == ["alpha", "zeta"]
    assert [check.name for check in registry.checks()] == ["alpha", "zeta"]
    assert registry.try_get("missing") is None
    assert registry["zeta"].name == "zeta"
    assert "alpha" in registry
    assert registry.builtin_names() == frozenset({"alpha"})


def test_builtin_checks_load_once() -> None:
    registry = CheckRegistry()
    load_builtin_checks(registry)

    assert len(registry) == len(BUILTIN_CHECKS)
    assert registry.builtin_names() == frozenset(registry)
    assert registry["latest-tag"].enabled_by_default
    assert not registry["required-label-owner"].enabled_by_default

    with pytest.raises(RegistryError, match="failed to load builtin checks"):
        load_builtin_checks(registry)


def test_builtin_checks_carry_descriptions_and_remediation() -> None:
    registry = CheckRegistry()
    load_builtin_checks(registry)

    for check in registry.checks():
        assert check.description
        assert check.remediation
