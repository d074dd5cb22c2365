# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint pipeline orchestration."""

from __future__ import annotations

import json
import os
import stat
from io import StringIO
from pathlib import Path

import pytest

from kubelint.config_loader import FlagOverrides
from kubelint.errors import (
    ConfigError,
    ExecutionError,
    FormatError,
    LintFindingsError,
    LoadError,
    RegistryError,
)
from kubelint.models import RunResult
from kubelint.orchestration import (
    NO_CHECKS_WARNING,
    NO_OBJECTS_WARNING,
    LintPipeline,
    LintRequest,
    PipelineStatus,
    run_lint,
)


class _FailingStream(StringIO):
    def write(self, text: str) -> int:
        raise OSError("stream closed")


def _pipeline(stdout: StringIO, warnings: list[str]) -> LintPipeline:
    return LintPipeline(warn=warnings.append, stdout=stdout, version="9.9.9")


def _request(tmp_path: Path, *paths: Path, **kwargs) -> LintRequest:
    kwargs.setdefault("output_file", tmp_path / "output.json")
    kwargs.setdefault("config_path", None)
    return LintRequest(paths=tuple(str(path) for path in paths), **kwargs)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_clean_run_writes_artifact_then_stdout(tmp_path: Path, clean_manifest: Path) -> None:
    stdout, warnings = StringIO(), []
    request = _request(tmp_path, clean_manifest, output_format="json")

    outcome = _pipeline(stdout, warnings).run(request)

    assert outcome.status is PipelineStatus.COMPLETED
    artifact = tmp_path / "output.json"
    assert artifact.read_text(encoding="utf-8") == stdout.getvalue()
    assert json.loads(stdout.getvalue())["Reports"] == []
    assert stat.S_IMODE(os.stat(artifact).st_mode) == 0o600
    assert warnings == []


@pytest.mark.parametrize("output_format", ["json", "sarif", "plain"])
def test_findings_raise_after_both_sinks_are_written(
    tmp_path: Path,
    latest_manifest: Path,
    output_format: str,
) -> None:
    stdout = StringIO()
    request = _request(tmp_path, latest_manifest, output_format=output_format)

    with pytest.raises(LintFindingsError) as excinfo:
        _pipeline(stdout, []).run(request)

    assert excinfo.value.count == 1
    assert excinfo.value.exit_code == 1
    assert (tmp_path / "output.json").read_text(encoding="utf-8") == stdout.getvalue()
    assert "latest-tag" in stdout.getvalue()


def test_valid_and_malformed_documents_in_one_file(
    tmp_path: Path,
    write_manifest,
    latest_deployment_yaml: str,
) -> None:
    path = write_manifest("mixed.yaml", f"{latest_deployment_yaml}---\nkind: [broken\n")
    stdout, warnings = StringIO(), []

    with pytest.raises(LintFindingsError):
        _pipeline(stdout, warnings).run(_request(tmp_path, path, output_format="json", verbose=True))

    payload = json.loads(stdout.getvalue())
    assert len(payload["Reports"]) == 1
    assert payload["Summary"]["InvalidObjects"] == 1
    assert len(warnings) == 1
    assert warnings[0].startswith(f"failed to load object from {path.as_posix()}")


def test_rerun_produces_identical_output(tmp_path: Path, latest_manifest: Path) -> None:
    outputs = []
    for _ in range(2):
        stdout = StringIO()
        with pytest.raises(LintFindingsError):
            _pipeline(stdout, []).run(_request(tmp_path, latest_manifest, output_format="sarif"))
        outputs.append(((tmp_path / "output.json").read_bytes(), stdout.getvalue()))

    assert outputs[0] == outputs[1]


def test_no_checks_enabled_warns_and_writes_nothing(tmp_path: Path, latest_manifest: Path) -> None:
    stdout, warnings = StringIO(), []
    request = _request(tmp_path, latest_manifest, flags=FlagOverrides(do_not_auto_add_defaults=True))

    outcome = _pipeline(stdout, warnings).run(request)

    assert outcome.status is PipelineStatus.NO_CHECKS_ENABLED
    assert outcome.result.reports == ()
    assert outcome.result.summary.kubelint_version == "9.9.9"
    assert warnings == [NO_CHECKS_WARNING]
    assert stdout.getvalue() == ""
    assert not (tmp_path / "output.json").exists()


def test_no_valid_objects_warns_and_writes_nothing(tmp_path: Path, write_manifest) -> None:
    path = write_manifest("broken.yaml", "kind: [broken\n")
    stdout, warnings = StringIO(), []

    outcome = _pipeline(stdout, warnings).run(_request(tmp_path, path))

    assert outcome.status is PipelineStatus.NO_VALID_OBJECTS
    assert warnings == [NO_OBJECTS_WARNING]
    assert stdout.getvalue() == ""
    assert not (tmp_path / "output.json").exists()


def test_unknown_format_fails_before_any_io(tmp_path: Path, latest_manifest: Path) -> None:
    stdout = StringIO()
    request = _request(tmp_path, latest_manifest, output_format="yaml", config_path=tmp_path / "missing.yaml")

    with pytest.raises(FormatError, match='unknown format "yaml"'):
        _pipeline(stdout, []).run(request)

    assert stdout.getvalue() == ""
    assert not (tmp_path / "output.json").exists()


def test_missing_config_is_wrapped(tmp_path: Path, latest_manifest: Path) -> None:
    request = _request(tmp_path, latest_manifest, config_path=tmp_path / "missing.yaml")

    with pytest.raises(ConfigError, match="failed to load config: config file .* not found"):
        _pipeline(StringIO(), []).run(request)


def test_unknown_include_fails_before_loading_inputs(tmp_path: Path) -> None:
    request = _request(tmp_path, tmp_path / "absent.yaml", flags=FlagOverrides(include=("ghost",)))

    with pytest.raises(RegistryError, match='enabled check "ghost" not found'):
        _pipeline(StringIO(), []).run(request)


def test_inaccessible_path_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        _pipeline(StringIO(), []).run(_request(tmp_path, tmp_path / "absent.yaml"))


def test_artifact_failure_leaves_stdout_untouched(tmp_path: Path, latest_manifest: Path) -> None:
    stdout = StringIO()
    request = _request(tmp_path, latest_manifest, output_file=tmp_path / "missing-dir" / "output.json")

    with pytest.raises(FormatError, match="output saving failed"):
        _pipeline(stdout, []).run(request)

    assert stdout.getvalue() == ""


def test_stdout_failure_after_artifact_is_written(tmp_path: Path, clean_manifest: Path) -> None:
    request = _request(tmp_path, clean_manifest, output_format="json")

    with pytest.raises(FormatError, match="output formatting failed"):
        _pipeline(_FailingStream(), []).run(request)

    assert json.loads((tmp_path / "output.json").read_text(encoding="utf-8"))["Reports"] == []


def test_artifact_is_truncated_on_rerun(tmp_path: Path, clean_manifest: Path) -> None:
    artifact = tmp_path / "output.json"
    artifact.write_text("x" * 10_000, encoding="utf-8")
    stdout = StringIO()

    _pipeline(stdout, []).run(_request(tmp_path, clean_manifest, output_format="json"))

    assert artifact.read_text(encoding="utf-8") == stdout.getvalue()


def test_custom_engine_is_injected(tmp_path: Path, clean_manifest: Path) -> None:
    seen: dict[str, object] = {}

    def engine(contexts, registry, enabled_checks, *, version):
        seen["enabled"] = enabled_checks
        seen["version"] = version
        return RunResult.empty(version)

    pipeline = LintPipeline(stdout=StringIO(), warn=lambda _msg: None, engine=engine, version="0.1")
    pipeline.run(_request(tmp_path, clean_manifest))

    assert "latest-tag" in seen["enabled"]
    assert seen["version"] == "0.1"


def test_run_lint_defaults_to_process_stdout(
    tmp_path: Path,
    clean_manifest: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    outcome = run_lint(_request(tmp_path, clean_manifest, output_format="json"))

    assert outcome.status is PipelineStatus.COMPLETED
    assert capsys.readouterr().out == (tmp_path / "output.json").read_text(encoding="utf-8")


def test_closed_stdout_is_a_format_error(tmp_path: Path, clean_manifest: Path) -> None:
    stdout = StringIO()
    stdout.close()

    with pytest.raises(FormatError, match="output formatting failed"):
        _pipeline(stdout, []).run(_request(tmp_path, clean_manifest, output_format="json"))

    assert json.loads((tmp_path / "output.json").read_text(encoding="utf-8"))["Reports"] == []


def test_engine_errors_carry_stage_label(tmp_path: Path, clean_manifest: Path) -> None:
    def engine(contexts, registry, enabled_checks, *, version):
        raise ExecutionError('check "x" failed')

    pipeline = LintPipeline(stdout=StringIO(), warn=lambda _msg: None, engine=engine)

    with pytest.raises(ExecutionError, match='failed to run checks: check "x" failed') as excinfo:
        pipeline.run(_request(tmp_path, clean_manifest))

    assert excinfo.value.exit_code == 2
    assert not (tmp_path / "output.json").exists()
