# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the kubelint package."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ObjectMetadata(BaseModel):
    """Where a lint object was loaded from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: str = Field(alias="FilePath")


class LintObject(BaseModel):
    """A successfully decoded Kubernetes object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: ObjectMetadata = Field(alias="Metadata")
    k8s_object: dict[str, Any] = Field(alias="K8sObject")

    @property
    def kind(self) -> str:
        """Return the object's ``kind``."""
        return str(self.k8s_object.get("kind", ""))

    @property
    def api_version(self) -> str:
        """Return the object's ``apiVersion``."""
        return str(self.k8s_object.get("apiVersion", ""))

    @property
    def object_meta(self) -> Mapping[str, Any]:
        """Return the ``metadata`` block of the manifest (empty when absent)."""
        meta = self.k8s_object.get("metadata")
        return meta if isinstance(meta, Mapping) else {}

    @property
    def name(self) -> str:
        """Return ``metadata.name``."""
        return str(self.object_meta.get("name") or "")

    @property
    def namespace(self) -> str:
        """Return ``metadata.namespace``."""
        return str(self.object_meta.get("namespace") or "")

    @property
    def labels(self) -> Mapping[str, str]:
        """Return ``metadata.labels`` (empty when absent)."""
        labels = self.object_meta.get("labels")
        return labels if isinstance(labels, Mapping) else {}

    @property
    def annotations(self) -> Mapping[str, str]:
        """Return ``metadata.annotations`` (empty when absent)."""
        annotations = self.object_meta.get("annotations")
        return annotations if isinstance(annotations, Mapping) else {}

    @property
    def k8s_object_name(self) -> str:
        """Return a display name such as ``ns/web apps/v1, Kind=Deployment``."""
        return f"{self.namespace}/{self.name} {self.api_version}, Kind={self.kind}"


class InvalidObject(BaseModel):
    """A document that could not be decoded into a :class:`LintObject`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: ObjectMetadata = Field(alias="Metadata")
    load_err: str = Field(alias="LoadErr")


class Diagnostic(BaseModel):
    """Message produced by a check for one object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(alias="Message")


class Report(BaseModel):
    """One triggered diagnostic tied to its object and check."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    diagnostic: Diagnostic = Field(alias="Diagnostic")
    check: str = Field(alias="Check")
    remediation: str = Field(alias="Remediation")
    object: LintObject = Field(alias="Object")


class ChecksStatus(str, Enum):
    """Overall outcome recorded in the run summary."""

    PASSED = "Passed"
    FAILED = "Failed"


class Summary(BaseModel):
    """Aggregate information describing one run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    checks_status: ChecksStatus = Field(alias="ChecksStatus")
    kubelint_version: str = Field(alias="KubeLinterVersion")
    objects: int = Field(default=0, alias="Objects")
    invalid_objects: int = Field(default=0, alias="InvalidObjects")
    enabled_checks: int = Field(default=0, alias="EnabledChecks")
    reports: int = Field(default=0, alias="Reports")


class RunResult(BaseModel):
    """Aggregate result for a full lint run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reports: tuple[Report, ...] = Field(default_factory=tuple, alias="Reports")
    summary: Summary = Field(alias="Summary")

    @classmethod
    def empty(cls, version: str) -> RunResult:
        """Return a passing result with no reports.

        Args:
            version: Tool version recorded in the summary.

        Returns:
            RunResult: Result describing a run that found nothing.
        """

        return cls(summary=Summary(checks_status=ChecksStatus.PASSED, kubelint_version=version))


__all__ = [
    "ChecksStatus",
    "Diagnostic",
    "InvalidObject",
    "LintObject",
    "ObjectMetadata",
    "Report",
    "RunResult",
    "Summary",
]
