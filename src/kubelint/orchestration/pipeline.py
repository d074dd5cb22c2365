# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lint pipeline orchestration.

The pipeline runs its stages strictly in order, each to completion:

1. resolve the output formatter (before any I/O),
2. load the configuration,
3. assemble the check registry (builtins, then custom checks),
4. resolve the enabled checks,
5. load the lint contexts,
6. run the checks,
7. write the rendered result to the artifact file, then to stdout,
8. turn a non-empty report list into :class:`LintFindingsError`.

Having no enabled checks or no valid objects is a warning, not a failure: the
pipeline stops early with an empty result and writes nothing.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, TextIO

from .. import __version__
from ..checks.builtins import load_builtin_checks
from ..checks.registry import CheckRegistry
from ..config import Config
from ..config_loader import FlagOverrides, load_config
from ..configresolver import get_enabled_checks_and_validate, load_custom_checks_into
from ..errors import ConfigError, ExecutionError, FormatError, LintFindingsError
from ..lintcontext import LintContext, create_contexts
from ..logging import warn
from ..models import RunResult
from ..reporting.formatters import FormatFunc, Formatters, FormatType, build_formatters
from ..run import run as run_checks

DEFAULT_OUTPUT_FILE: Final[Path] = Path("output.json")
NO_CHECKS_WARNING: Final[str] = "no checks enabled."
NO_OBJECTS_WARNING: Final[str] = "no valid objects found."

ConfigLoaderFn = Callable[[FlagOverrides, Path | None], Config]
EngineFn = Callable[..., RunResult]
WarnFn = Callable[[str], None]

_LOG = logging.getLogger(__name__)


class PipelineStatus(str, Enum):
    """How a pipeline run ended when it did not raise."""

    COMPLETED = "completed"
    NO_CHECKS_ENABLED = "no-checks-enabled"
    NO_VALID_OBJECTS = "no-valid-objects"


@dataclass(frozen=True, slots=True)
class LintRequest:
    """Inputs for one ``lint`` invocation."""

    paths: tuple[str, ...]
    config_path: Path | None = None
    flags: FlagOverrides = field(default_factory=FlagOverrides)
    output_format: str = FormatType.PLAIN.value
    verbose: bool = False
    output_file: Path = DEFAULT_OUTPUT_FILE


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Result of a pipeline run that finished without a fatal error."""

    status: PipelineStatus
    result: RunResult


def _stderr_warning(message: str) -> None:
    warn(message)


@dataclass(slots=True)
class LintPipeline:
    """Coordinate configuration, registry, loading, execution, and output.

    Collaborators are injectable so tests can substitute any stage.
    """

    formatters: Formatters = field(default_factory=build_formatters)
    warn: WarnFn = _stderr_warning
    stdout: TextIO | None = None
    config_loader: ConfigLoaderFn = load_config
    engine: EngineFn = run_checks
    version: str = __version__

    def run(self, request: LintRequest) -> PipelineOutcome:
        """Run the full pipeline for ``request``.

        Args:
            request: Paths, flags, and output settings for this invocation.

        Returns:
            PipelineOutcome: Outcome of a run that produced no lint reports.

        Raises:
            ConfigError: If configuration cannot be resolved.
            RegistryError: If check assembly or enablement fails.
            LoadError: If an input path cannot be accessed.
            ExecutionError: If the run engine fails.
            FormatError: If the format is unknown or an output write fails.
            LintFindingsError: If the run produced one or more reports.
        """

        formatter = self.formatters.formatter_by_type(request.output_format)
        config = self._load_config(request)
        registry = self._build_registry(config)

        enabled_checks = get_enabled_checks_and_validate(config, registry)
        if not enabled_checks:
            return self._stop_early(PipelineStatus.NO_CHECKS_ENABLED, NO_CHECKS_WARNING)

        contexts = create_contexts(*request.paths, ignore_paths=config.checks.ignore_paths)
        if request.verbose:
            self._report_invalid_objects(contexts)
        if not any(context.objects() for context in contexts):
            return self._stop_early(PipelineStatus.NO_VALID_OBJECTS, NO_OBJECTS_WARNING)

        result = self._run_engine(contexts, registry, enabled_checks)
        self._write_outputs(formatter, result, request.output_file)

        if result.reports:
            raise LintFindingsError(len(result.reports))
        return PipelineOutcome(PipelineStatus.COMPLETED, result)

    def _load_config(self, request: LintRequest) -> Config:
        try:
            return self.config_loader(request.flags, request.config_path)
        except ConfigError as exc:
            raise ConfigError(f"failed to load config: {exc}") from exc

    def _build_registry(self, config: Config) -> CheckRegistry:
        registry = CheckRegistry()
        load_builtin_checks(registry)
        load_custom_checks_into(config, registry)
        _LOG.debug("registered %d check(s)", len(registry))
        return registry

    def _run_engine(
        self,
        contexts: Sequence[LintContext],
        registry: CheckRegistry,
        enabled_checks: frozenset[str],
    ) -> RunResult:
        try:
            return self.engine(contexts, registry, enabled_checks, version=self.version)
        except ExecutionError as exc:
            raise ExecutionError(f"failed to run checks: {exc}") from exc

    def _stop_early(self, status: PipelineStatus, message: str) -> PipelineOutcome:
        self.warn(message)
        return PipelineOutcome(status, RunResult.empty(self.version))

    def _report_invalid_objects(self, contexts: Sequence[LintContext]) -> None:
        for context in contexts:
            for invalid in context.invalid_objects():
                self.warn(f"failed to load object from {invalid.metadata.file_path}: {invalid.load_err}")

    def _write_outputs(self, formatter: FormatFunc, result: RunResult, output_file: Path) -> None:
        """Render ``result`` to the artifact file, then to stdout.

        Raises:
            FormatError: ``output saving failed`` when the artifact cannot be
                written (stdout is then left untouched), or ``output
                formatting failed`` when stdout cannot be written. Closed
                streams and encoding failures count as write failures.
        """

        try:
            fd = os.open(output_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as artifact:
                formatter(artifact, result)
        except (OSError, ValueError) as exc:
            raise FormatError(f"output saving failed: {exc}") from exc

        stdout = self.stdout if self.stdout is not None else sys.stdout
        try:
            formatter(stdout, result)
            stdout.flush()
        except (OSError, ValueError) as exc:
            raise FormatError(f"output formatting failed: {exc}") from exc


def run_lint(request: LintRequest, *, pipeline: LintPipeline | None = None) -> PipelineOutcome:
    """Run ``request`` through ``pipeline`` (a default pipeline when omitted)."""

    return (pipeline or LintPipeline()).run(request)


__all__ = [
    "DEFAULT_OUTPUT_FILE",
    "NO_CHECKS_WARNING",
    "NO_OBJECTS_WARNING",
    "LintPipeline",
    "LintRequest",
    "PipelineOutcome",
    "PipelineStatus",
    "run_lint",
]
