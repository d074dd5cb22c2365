# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering helpers for ``checks list`` and ``templates list``."""

from __future__ import annotations

import json
from collections.abc import Iterable
from enum import Enum
from typing import Any, Final

from ....checks.base import CheckDefinition
from ....checks.templates import CheckTemplate

SEPARATOR: Final[str] = "-" * 30


class ListFormat(str, Enum):
    """Formats supported by the listing commands."""

    PLAIN = "plain"
    JSON = "json"


def check_payload(check: CheckDefinition) -> dict[str, Any]:
    """Return a JSON-ready description of ``check``."""

    return {
        "name": check.name,
        "description": check.description,
        "remediation": check.remediation,
        "template": check.spec.template,
        "params": dict(check.spec.params),
        "scope": {"objectKinds": list(check.object_kinds)},
        "severity": check.severity.value,
        "enabledByDefault": check.enabled_by_default,
        "builtin": check.builtin,
    }


def render_checks(checks: Iterable[CheckDefinition], output_format: ListFormat) -> str:
    """Render ``checks`` in the requested listing format."""

    if output_format is ListFormat.JSON:
        return json.dumps([check_payload(check) for check in checks], indent=2)
    blocks = []
    for check in checks:
        lines = [
            f"Name: {check.name}",
            f"Description: {check.description}",
            f"Remediation: {check.remediation}",
            f"Template: {check.spec.template}",
            f"Parameters: {json.dumps(dict(check.spec.params), sort_keys=True)}",
            f"Enabled by default: {str(check.enabled_by_default).lower()}",
        ]
        blocks.append("\n".join(lines))
    return f"\n\n{SEPARATOR}\n\n".join(blocks)


def template_payload(template: CheckTemplate) -> dict[str, Any]:
    """Return a JSON-ready description of ``template``."""

    return {
        "key": template.key,
        "description": template.description,
        "supportedObjectKinds": list(template.supported_object_kinds),
        "parameters": [
            {
                "name": param.name,
                "description": param.description,
                "type": param.type,
                "required": param.required,
                "choices": list(param.choices),
            }
            for param in template.parameters
        ],
    }


def render_templates(templates: Iterable[CheckTemplate], output_format: ListFormat) -> str:
    """Render ``templates`` in the requested listing format."""

    if output_format is ListFormat.JSON:
        return json.dumps([template_payload(template) for template in templates], indent=2)
    blocks = []
    for template in templates:
        lines = [
            f"Key: {template.key}",
            f"Description: {template.description}",
            f"Supported Objects: {', '.join(template.supported_object_kinds)}",
        ]
        if template.parameters:
            lines.append("Parameters:")
            for param in template.parameters:
                required = ", required" if param.required else ""
                lines.append(f"  - {param.name} ({param.type}{required}): {param.description}")
        else:
            lines.append("Parameters: none")
        blocks.append("\n".join(lines))
    return f"\n\n{SEPARATOR}\n\n".join(blocks)


__all__ = ["ListFormat", "check_payload", "render_checks", "render_templates", "template_payload"]
