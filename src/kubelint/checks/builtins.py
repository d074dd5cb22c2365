# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Builtin check catalogue."""

from __future__ import annotations

from typing import Final

from ..errors import RegistryError
from .base import CheckSpec
from .registry import CheckRegistry
from .templates import compile_check

# (spec, enabled by default)
BUILTIN_CHECKS: Final[tuple[tuple[CheckSpec, bool], ...]] = (
    (
        CheckSpec(
            name="latest-tag",
            template="latest-tag",
            description="Indicates when a deployment-like object is running a container with an untagged or latest image.",
            remediation="Use a container image with a specific tag other than latest.",
        ),
        True,
    ),
    (
        CheckSpec(
            name="privileged-container",
            template="privileged",
            description="Indicates when deployments have containers running in privileged mode.",
            remediation="Do not run your container as privileged unless it is required.",
        ),
        True,
    ),
    (
        CheckSpec(
            name="run-as-non-root",
            template="run-as-non-root",
            description="Indicates when containers are not set to runAsNonRoot.",
            remediation=(
                "Set runAsUser to a non-zero number and runAsNonRoot to true in your pod or "
                "container securityContext."
            ),
        ),
        True,
    ),
    (
        CheckSpec(
            name="no-read-only-root-fs",
            template="read-only-root-fs",
            description="Indicates when containers are running without a read-only root filesystem.",
            remediation="Set readOnlyRootFilesystem to true in the container securityContext.",
        ),
        True,
    ),
    (
        CheckSpec(
            name="unset-cpu-requirements",
            template="cpu-requirements",
            description="Indicates when containers do not have CPU requests and limits set.",
            remediation="Set CPU requests and limits for your container based on its requirements.",
        ),
        True,
    ),
    (
        CheckSpec(
            name="unset-memory-requirements",
            template="memory-requirements",
            description="Indicates when containers do not have memory requests and limits set.",
            remediation="Set memory requests and limits for your container based on its requirements.",
        ),
        True,
    ),
    (
        CheckSpec(
            name="required-label-owner",
            template="required-label",
            params={"key": "owner"},
            description="Indicates when objects do not have an owner label.",
            remediation="Add an owner label to your object with the name of the team that owns it.",
        ),
        False,
    ),
    (
        CheckSpec(
            name="required-annotation-email",
            template="required-annotation",
            params={"key": "email"},
            description="Indicates when objects do not have an email annotation.",
            remediation="Add an email annotation to your object with the contact for the team that owns it.",
        ),
        False,
    ),
)


def load_builtin_checks(registry: CheckRegistry) -> None:
    """Compile and register every builtin check into ``registry``.

    Args:
        registry: Registry receiving the builtin checks.

    Raises:
        RegistryError: If a builtin fails to compile or collides with an
            existing entry, which indicates a packaging defect.
    """

    for spec, enabled_by_default in BUILTIN_CHECKS:
        try:
            check = compile_check(spec, enabled_by_default=enabled_by_default, builtin=True)
            registry.register(check)
        except RegistryError as exc:
            raise RegistryError(f"failed to load builtin checks: {exc}") from exc


__all__ = ["BUILTIN_CHECKS", "load_builtin_checks"]
