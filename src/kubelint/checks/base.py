# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check specifications and compiled check definitions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Diagnostic, LintObject
from ..severity import Severity
from .objectkinds import matches_kind

CheckFunc = Callable[[LintObject], list[Diagnostic]]


class ObjectKindsScope(BaseModel):
    """Object kinds a check applies to."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    object_kinds: tuple[str, ...] = Field(default_factory=tuple, alias="objectKinds")


class CheckSpec(BaseModel):
    """Declarative description of a check instantiated from a template."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    template: str
    description: str = ""
    remediation: str = ""
    params: dict[str, Any] = Field(default_factory=dict)
    scope: ObjectKindsScope | None = None
    severity: Severity = Severity.ERROR

    @field_validator("name", "template")
    @classmethod
    def _require_text(cls, value: str) -> str:
        """Reject blank names and template keys."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be empty")
        return stripped


class CheckDefinition(BaseModel):
    """A check ready to run: its spec plus the compiled predicate."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    spec: CheckSpec
    func: CheckFunc
    object_kinds: tuple[str, ...]
    enabled_by_default: bool = False
    builtin: bool = False

    @property
    def name(self) -> str:
        """Return the unique check name."""
        return self.spec.name

    @property
    def description(self) -> str:
        """Return the human description of the check."""
        return self.spec.description

    @property
    def remediation(self) -> str:
        """Return remediation advice attached to every report."""
        return self.spec.remediation

    @property
    def severity(self) -> Severity:
        """Return the severity used by machine-readable formats."""
        return self.spec.severity

    def applies_to(self, obj: LintObject) -> bool:
        """Return ``True`` when the check's scope covers ``obj``."""
        return matches_kind(obj, self.object_kinds)


__all__ = ["CheckDefinition", "CheckFunc", "CheckSpec", "ObjectKindsScope"]
