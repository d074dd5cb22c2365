# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check templates and compilation of check specs into runnable checks.

A template is a parameterised predicate. Builtin checks and user-defined
custom checks are both :class:`~kubelint.checks.base.CheckSpec` values that
name a template and supply its parameters; :func:`compile_check` validates the
parameters and binds them into a :class:`~kubelint.checks.base.CheckDefinition`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final, Literal

from ..errors import RegistryError
from ..models import Diagnostic, LintObject
from .base import CheckDefinition, CheckFunc, CheckSpec
from .objectkinds import ANY, DEPLOYMENT_LIKE, containers, pod_spec

ParamType = Literal["string", "boolean"]
CheckFactory = Callable[[Mapping[str, Any]], CheckFunc]


@dataclass(frozen=True, slots=True)
class TemplateParameter:
    """A parameter accepted by a check template."""

    name: str
    description: str
    type: ParamType = "string"
    required: bool = False
    choices: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CheckTemplate:
    """A named, parameterised check factory."""

    key: str
    description: str
    supported_object_kinds: tuple[str, ...]
    factory: CheckFactory
    parameters: tuple[TemplateParameter, ...] = field(default_factory=tuple)

    def validate_params(self, check_name: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``params`` after checking names, types, and required entries.

        Args:
            check_name: Check being compiled, used in error messages.
            params: Raw parameter mapping from the check spec.

        Returns:
            dict[str, Any]: Validated parameters.

        Raises:
            RegistryError: If a parameter is unknown, missing, or mistyped.
        """

        known = {param.name: param for param in self.parameters}
        for key in params:
            if key not in known:
                raise RegistryError(
                    f'check "{check_name}": unknown parameter "{key}" for template "{self.key}"',
                )
        validated: dict[str, Any] = {}
        for param in self.parameters:
            if param.name not in params:
                if param.required:
                    raise RegistryError(
                        f'check "{check_name}": required parameter "{param.name}" '
                        f'missing for template "{self.key}"',
                    )
                continue
            value = params[param.name]
            expected = bool if param.type == "boolean" else str
            if not isinstance(value, expected):
                raise RegistryError(
                    f'check "{check_name}": parameter "{param.name}" must be a {param.type}',
                )
            if param.choices and value not in param.choices:
                choices = ", ".join(param.choices)
                raise RegistryError(
                    f'check "{check_name}": parameter "{param.name}" must be one of: {choices}',
                )
            validated[param.name] = value
        return validated


def _latest_tag(_params: Mapping[str, Any]) -> CheckFunc:
    def check(obj: LintObject) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for container in containers(obj):
            image = str(container.get("image") or "")
            if _has_pinned_tag(image):
                continue
            diagnostics.append(
                Diagnostic(
                    message=(
                        f'The container "{container.get("name", "")}" is using an invalid container '
                        f'image, "{image}". Please use images with a pinned, non-latest tag.'
                    ),
                ),
            )
        return diagnostics

    return check


def _has_pinned_tag(image: str) -> bool:
    if "@" in image:
        return True
    last_segment = image.rsplit("/", 1)[-1]
    if ":" not in last_segment:
        return False
    return last_segment.rsplit(":", 1)[1] not in {"", "latest"}


def _privileged(_params: Mapping[str, Any]) -> CheckFunc:
    def check(obj: LintObject) -> list[Diagnostic]:
        return [
            Diagnostic(message=f'container "{container.get("name", "")}" is privileged')
            for container in containers(obj)
            if _security_context(container).get("privileged") is True
        ]

    return check


def _run_as_non_root(_params: Mapping[str, Any]) -> CheckFunc:
    def check(obj: LintObject) -> list[Diagnostic]:
        spec = pod_spec(obj) or {}
        pod_context = spec.get("securityContext")
        pod_context = pod_context if isinstance(pod_context, Mapping) else {}
        diagnostics: list[Diagnostic] = []
        for container in containers(obj):
            context = _security_context(container)
            non_root = context.get("runAsNonRoot", pod_context.get("runAsNonRoot"))
            user = context.get("runAsUser", pod_context.get("runAsUser"))
            if non_root is True or (isinstance(user, int) and user > 0):
                continue
            diagnostics.append(
                Diagnostic(
                    message=(
                        f'container "{container.get("name", "")}" is not set to runAsNonRoot'
                    ),
                ),
            )
        return diagnostics

    return check


def _read_only_root_fs(_params: Mapping[str, Any]) -> CheckFunc:
    def check(obj: LintObject) -> list[Diagnostic]:
        return [
            Diagnostic(
                message=(
                    f'container "{container.get("name", "")}" does not have a read-only root file system'
                ),
            )
            for container in containers(obj)
            if _security_context(container).get("readOnlyRootFilesystem") is not True
        ]

    return check


def _requirements(resource: str) -> CheckFactory:
    def factory(params: Mapping[str, Any]) -> CheckFunc:
        requirements_type = params.get("requirementsType", "any")
        sections = {"request": ("requests",), "limit": ("limits",)}.get(
            requirements_type,
            ("requests", "limits"),
        )

        def check(obj: LintObject) -> list[Diagnostic]:
            diagnostics: list[Diagnostic] = []
            for container in containers(obj):
                resources = container.get("resources")
                resources = resources if isinstance(resources, Mapping) else {}
                for section in sections:
                    values = resources.get(section)
                    values = values if isinstance(values, Mapping) else {}
                    if _is_zero_quantity(values.get(resource)):
                        label = "request" if section == "requests" else "limit"
                        diagnostics.append(
                            Diagnostic(
                                message=(
                                    f'container "{container.get("name", "")}" has {resource} {label} 0'
                                ),
                            ),
                        )
            return diagnostics

        return check

    return factory


def _is_zero_quantity(value: object) -> bool:
    if value is None:
        return True
    text = str(value).strip()
    if not text:
        return True
    digits = text.rstrip("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    try:
        return float(digits) == 0
    except ValueError:
        return False


def _required_metadata(field_name: Literal["label", "annotation"]) -> CheckFactory:
    def factory(params: Mapping[str, Any]) -> CheckFunc:
        key = params["key"]
        expected = params.get("value")

        def check(obj: LintObject) -> list[Diagnostic]:
            entries = obj.labels if field_name == "label" else obj.annotations
            if key in entries and (expected is None or str(entries[key]) == expected):
                return []
            shown = expected if expected is not None else "<any>"
            return [Diagnostic(message=f'no {field_name} matching "{key}={shown}" found')]

        return check

    return factory


def _security_context(container: Mapping[str, Any]) -> Mapping[str, Any]:
    context = container.get("securityContext")
    return context if isinstance(context, Mapping) else {}


_REQUIREMENTS_PARAM = TemplateParameter(
    name="requirementsType",
    description="Which requirement to check: request, limit, or any.",
    choices=("request", "limit", "any"),
)

TEMPLATES: Final[Mapping[str, CheckTemplate]] = MappingProxyType(
    {
        template.key: template
        for template in (
            CheckTemplate(
                key="latest-tag",
                description="Flag containers whose image has no tag or uses the latest tag.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_latest_tag,
            ),
            CheckTemplate(
                key="privileged",
                description="Flag containers running in privileged mode.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_privileged,
            ),
            CheckTemplate(
                key="run-as-non-root",
                description="Flag containers not configured to run as a non-root user.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_run_as_non_root,
            ),
            CheckTemplate(
                key="read-only-root-fs",
                description="Flag containers without a read-only root file system.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_read_only_root_fs,
            ),
            CheckTemplate(
                key="cpu-requirements",
                description="Flag containers with an unset or zero CPU request or limit.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_requirements("cpu"),
                parameters=(_REQUIREMENTS_PARAM,),
            ),
            CheckTemplate(
                key="memory-requirements",
                description="Flag containers with an unset or zero memory request or limit.",
                supported_object_kinds=(DEPLOYMENT_LIKE,),
                factory=_requirements("memory"),
                parameters=(_REQUIREMENTS_PARAM,),
            ),
            CheckTemplate(
                key="required-label",
                description="Flag objects that do not carry the given label.",
                supported_object_kinds=(ANY,),
                factory=_required_metadata("label"),
                parameters=(
                    TemplateParameter(name="key", description="Label key.", required=True),
                    TemplateParameter(name="value", description="Expected label value."),
                ),
            ),
            CheckTemplate(
                key="required-annotation",
                description="Flag objects that do not carry the given annotation.",
                supported_object_kinds=(ANY,),
                factory=_required_metadata("annotation"),
                parameters=(
                    TemplateParameter(name="key", description="Annotation key.", required=True),
                    TemplateParameter(name="value", description="Expected annotation value."),
                ),
            ),
        )
    },
)


def compile_check(
    spec: CheckSpec,
    *,
    templates: Mapping[str, CheckTemplate] = TEMPLATES,
    enabled_by_default: bool = False,
    builtin: bool = False,
) -> CheckDefinition:
    """Bind ``spec`` to its template and return a runnable check.

    Args:
        spec: Declarative check description.
        templates: Template catalogue used to resolve ``spec.template``.
        enabled_by_default: Whether the check runs without being included.
        builtin: Whether the check ships with kubelint.

    Returns:
        CheckDefinition: Compiled check.

    Raises:
        RegistryError: If the template is unknown, the parameters are invalid,
            or the scope lists an empty object kind.
    """

    template = templates.get(spec.template)
    if template is None:
        raise RegistryError(f'check "{spec.name}": unknown template "{spec.template}"')
    params = template.validate_params(spec.name, spec.params)
    object_kinds = template.supported_object_kinds
    if spec.scope is not None and spec.scope.object_kinds:
        object_kinds = spec.scope.object_kinds
    for kind in object_kinds:
        if not kind.strip():
            raise RegistryError(f'check "{spec.name}": empty object kind in scope')
    func = template.factory(params)
    return CheckDefinition(
        spec=spec,
        func=func,
        object_kinds=tuple(object_kinds),
        enabled_by_default=enabled_by_default,
        builtin=builtin,
    )


__all__ = [
    "TEMPLATES",
    "CheckTemplate",
    "TemplateParameter",
    "compile_check",
]
