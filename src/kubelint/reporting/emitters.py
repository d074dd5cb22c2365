# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render run results as JSON, SARIF, or plain text.

Every renderer is a pure function of the :class:`RunResult`: it builds the
complete text first and writes it to the sink in one call, so the same result
always produces the same bytes regardless of the sink.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final, TextIO

from ..logging import colorize
from ..models import Report, RunResult

SARIF_VERSION: Final[str] = "2.1.0"
SARIF_SCHEMA: Final[str] = "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0.json"
SARIF_TOOL_NAME: Final[str] = "kubelint"
SARIF_INFORMATION_URI: Final[str] = "https://github.com/stackrox/kube-linter"

PLAIN_HEADER_TEMPLATE: Final[str] = "KubeLinter {version}\n\n"
PLAIN_REPORT_TEMPLATE: Final[str] = (
    "{file}: (object: {name}) {message} (check: {check}, remediation: {remediation})\n\n"
)
PLAIN_EMPTY_MESSAGE: Final[str] = "No lint errors found!\n"


def render_json(result: RunResult) -> str:
    """Return ``result`` serialised as indented JSON."""

    payload = result.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2) + "\n"


def format_json(sink: TextIO, result: RunResult) -> None:
    """Write the JSON rendering of ``result`` to ``sink``."""

    sink.write(render_json(result))


def render_sarif(result: RunResult) -> str:
    """Return ``result`` as a SARIF 2.1.0 document."""

    rules: dict[str, dict[str, object]] = {}
    results: list[dict[str, object]] = []
    for report in result.reports:
        if report.check not in rules:
            rules[report.check] = {
                "id": report.check,
                "name": report.check,
                "shortDescription": {"text": report.check},
                "help": {"text": report.remediation},
            }
        results.append(_sarif_result(report))

    sarif_doc = {
        "version": SARIF_VERSION,
        "$schema": SARIF_SCHEMA,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": SARIF_TOOL_NAME,
                        "version": result.summary.kubelint_version,
                        "informationUri": SARIF_INFORMATION_URI,
                        "rules": list(rules.values()),
                    },
                },
                "results": results,
            },
        ],
    }
    return json.dumps(sarif_doc, indent=2) + "\n"


def _sarif_result(report: Report) -> dict[str, Any]:
    obj = report.object
    logical: dict[str, str] = {"name": obj.name, "kind": obj.kind}
    if obj.namespace:
        logical["fullyQualifiedName"] = f"{obj.namespace}/{obj.name}"
    return {
        "ruleId": report.check,
        "level": "error",
        "message": {"text": report.diagnostic.message},
        "locations": [
            {
                "physicalLocation": {"artifactLocation": {"uri": obj.metadata.file_path}},
                "logicalLocations": [logical],
            },
        ],
    }


def format_sarif(sink: TextIO, result: RunResult) -> None:
    """Write the SARIF rendering of ``result`` to ``sink``."""

    sink.write(render_sarif(result))


@dataclass(frozen=True, slots=True)
class PlainTemplate:
    """Human-readable renderer; colour is fixed when the template is built."""

    color: bool = False

    def render(self, result: RunResult) -> str:
        """Return the plain-text rendering of ``result``."""

        parts = [PLAIN_HEADER_TEMPLATE.format(version=result.summary.kubelint_version)]
        if not result.reports:
            parts.append(PLAIN_EMPTY_MESSAGE)
        for report in result.reports:
            parts.append(
                PLAIN_REPORT_TEMPLATE.format(
                    file=colorize(report.object.metadata.file_path, "bold", self.color),
                    name=colorize(report.object.k8s_object_name, "bold", self.color),
                    message=colorize(report.diagnostic.message, "red", self.color),
                    check=colorize(report.check, "yellow", self.color),
                    remediation=colorize(report.remediation, "yellow", self.color),
                ),
            )
        return "".join(parts)

    def execute(self, sink: TextIO, result: RunResult) -> None:
        """Write the plain-text rendering of ``result`` to ``sink``."""

        sink.write(self.render(result))


__all__ = [
    "SARIF_SCHEMA",
    "SARIF_VERSION",
    "PlainTemplate",
    "format_json",
    "format_sarif",
    "render_json",
    "render_sarif",
]
