# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve custom checks and the enabled-check set from configuration."""

from __future__ import annotations

from .checks.registry import CheckRegistry
from .checks.templates import compile_check
from .config import Config
from .errors import RegistryError


def load_custom_checks_into(config: Config, registry: CheckRegistry) -> None:
    """Compile every custom check in ``config`` and add it to ``registry``.

    Args:
        config: Effective configuration holding ``custom_checks``.
        registry: Registry already holding the builtin checks.

    Raises:
        RegistryError: If a custom check is malformed or its name collides
            with a builtin or another custom check.
    """

    for spec in config.custom_checks:
        try:
            registry.register(compile_check(spec))
        except RegistryError as exc:
            raise RegistryError(f"failed to load custom check {spec.name!r}: {exc}") from exc


def get_enabled_checks_and_validate(config: Config, registry: CheckRegistry) -> frozenset[str]:
    """Return the names of the checks that should run.

    The set starts from every builtin (``addAllBuiltIn``), from the builtins
    enabled by default (unless ``doNotAutoAddDefaults``), or from nothing. All
    custom checks and every ``include`` entry are then added, and every
    ``exclude`` entry removed.

    Args:
        config: Effective configuration.
        registry: Registry holding builtin and custom checks.

    Returns:
        frozenset[str]: Enabled check names; may be empty.

    Raises:
        RegistryError: If ``include`` or ``exclude`` names an unknown check, or
            a check is both included and excluded.
    """

    checks_cfg = config.checks
    unknown = [f'enabled check "{name}" not found' for name in checks_cfg.include if name not in registry]
    unknown.extend(f'excluded check "{name}" not found' for name in checks_cfg.exclude if name not in registry)
    if unknown:
        raise RegistryError("invalid check configuration: " + "; ".join(unknown))
    conflicting = sorted(set(checks_cfg.include) & set(checks_cfg.exclude))
    if conflicting:
        names = ", ".join(conflicting)
        raise RegistryError(f"invalid check configuration: checks both included and excluded: {names}")

    enabled: set[str] = set()
    if checks_cfg.add_all_builtin:
        enabled.update(registry.builtin_names())
    elif not checks_cfg.do_not_auto_add_defaults:
        enabled.update(check.name for check in registry.checks() if check.builtin and check.enabled_by_default)
    enabled.update(spec.name for spec in config.custom_checks)
    enabled.update(checks_cfg.include)
    enabled.difference_update(checks_cfg.exclude)
    return frozenset(enabled)


__all__ = ["get_enabled_checks_and_validate", "load_custom_checks_into"]
