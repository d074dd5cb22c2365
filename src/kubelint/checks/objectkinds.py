# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Object kind groups and pod-spec helpers for Kubernetes manifests."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Final

from ..models import LintObject

ANY: Final[str] = "Any"
DEPLOYMENT_LIKE: Final[str] = "DeploymentLike"

_DEPLOYMENT_LIKE_KINDS: Final[frozenset[str]] = frozenset(
    {
        "CronJob",
        "DaemonSet",
        "Deployment",
        "DeploymentConfig",
        "Job",
        "Pod",
        "ReplicaSet",
        "ReplicationController",
        "StatefulSet",
    },
)


def matches_kind(obj: LintObject, object_kinds: tuple[str, ...]) -> bool:
    """Return ``True`` when ``obj`` falls in any of ``object_kinds``.

    Entries may be a group name (``Any``, ``DeploymentLike``) or a literal
    Kubernetes kind such as ``Service``.

    Args:
        obj: Object being considered for a check.
        object_kinds: Group or kind names from the check scope.

    Returns:
        bool: Whether the check applies to the object.
    """

    for candidate in object_kinds:
        if candidate == ANY:
            return True
        if candidate == DEPLOYMENT_LIKE and obj.kind in _DEPLOYMENT_LIKE_KINDS:
            return True
        if candidate == obj.kind:
            return True
    return False


def pod_spec(obj: LintObject) -> Mapping[str, Any] | None:
    """Return the pod spec embedded in a deployment-like object."""

    spec = obj.k8s_object.get("spec")
    if not isinstance(spec, Mapping):
        return None
    if obj.kind == "Pod":
        return spec
    if obj.kind == "CronJob":
        spec = _dig(spec, "jobTemplate", "spec")
        if spec is None:
            return None
    template_spec = _dig(spec, "template", "spec")
    return template_spec


def containers(obj: LintObject) -> Iterator[Mapping[str, Any]]:
    """Yield every container and init container of a deployment-like object."""

    spec = pod_spec(obj)
    if spec is None:
        return
    for key in ("initContainers", "containers"):
        items = spec.get(key) or []
        if not isinstance(items, list):
            continue
        for container in items:
            if isinstance(container, Mapping):
                yield container


def _dig(data: Mapping[str, Any], *keys: str) -> Mapping[str, Any] | None:
    current: Any = data
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current if isinstance(current, Mapping) else None


__all__ = [
    "ANY",
    "DEPLOYMENT_LIKE",
    "containers",
    "matches_kind",
    "pod_spec",
]
