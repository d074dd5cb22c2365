# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn path arguments into lint contexts holding decoded manifest objects.

Loading is best-effort per document: a YAML file is split on ``---`` separator
lines and each document is decoded on its own, so one malformed document never
hides its siblings. Only an inaccessible path argument is fatal.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from .errors import LoadError
from .models import InvalidObject, LintObject, ObjectMetadata

STDIN_PATH: Final[str] = "-"
YAML_SUFFIXES: Final[frozenset[str]] = frozenset({".yaml", ".yml"})

_DOCUMENT_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"^---(?:\s+(?P<rest>.*))?$")
_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("apiVersion", "kind")

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintContext:
    """Objects decoded from one path argument, valid and invalid alike."""

    source: str
    _objects: tuple[LintObject, ...] = field(default_factory=tuple)
    _invalid_objects: tuple[InvalidObject, ...] = field(default_factory=tuple)

    def objects(self) -> tuple[LintObject, ...]:
        """Return the successfully decoded objects in load order."""
        return self._objects

    def invalid_objects(self) -> tuple[InvalidObject, ...]:
        """Return the documents that failed to decode, in load order."""
        return self._invalid_objects


def create_contexts(*paths: str | Path, ignore_paths: Sequence[str] = ()) -> list[LintContext]:
    """Return one :class:`LintContext` per path argument.

    Args:
        *paths: Files or directories to lint. ``-`` reads from stdin.
        ignore_paths: Glob patterns; matching files and directories are skipped.

    Returns:
        list[LintContext]: Contexts in argument order.

    Raises:
        LoadError: If a path argument cannot be accessed.
    """

    return [_create_context(str(path), ignore_paths) for path in paths]


def _create_context(raw_path: str, ignore_paths: Sequence[str]) -> LintContext:
    objects: list[LintObject] = []
    invalid: list[InvalidObject] = []
    if raw_path == STDIN_PATH:
        _collect(_decode_file_text(sys.stdin.read(), "<standard input>"), objects, invalid)
        return LintContext(raw_path, tuple(objects), tuple(invalid))

    path = Path(raw_path)
    try:
        path.stat()
    except OSError as exc:
        raise LoadError(f"failed to load {raw_path}: {exc.strerror or exc}") from exc

    for file_path in _iter_files(path, ignore_paths):
        _collect(_load_file(file_path), objects, invalid)
    _LOG.debug("loaded %d object(s), %d invalid, from %s", len(objects), len(invalid), raw_path)
    return LintContext(raw_path, tuple(objects), tuple(invalid))


def _collect(
    loaded: Iterable[LintObject | InvalidObject],
    objects: list[LintObject],
    invalid: list[InvalidObject],
) -> None:
    for item in loaded:
        if isinstance(item, LintObject):
            objects.append(item)
        else:
            invalid.append(item)


def _iter_files(path: Path, ignore_paths: Sequence[str]) -> Iterator[Path]:
    """Yield files under ``path`` that should be loaded.

    An explicitly named file is always loaded unless ignored; directories are
    walked recursively in sorted order and only YAML files are loaded.
    """

    if _is_ignored(path, ignore_paths):
        return
    if not path.is_dir():
        yield path
        return
    for candidate in sorted(path.rglob("*")):
        if not candidate.is_file() or candidate.suffix not in YAML_SUFFIXES:
            continue
        if _is_ignored(candidate, ignore_paths):
            continue
        yield candidate


def _is_ignored(path: Path, ignore_paths: Sequence[str]) -> bool:
    if not ignore_paths:
        return False
    candidates = {path.as_posix(), path.resolve().as_posix()}
    return any(fnmatch(candidate, pattern) for candidate in candidates for pattern in ignore_paths)


def _load_file(path: Path) -> Iterator[LintObject | InvalidObject]:
    file_path = path.as_posix()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        yield _invalid(file_path, f"failed to read file: {exc}")
        return
    yield from _decode_file_text(text, file_path)


def _decode_file_text(text: str, file_path: str) -> Iterator[LintObject | InvalidObject]:
    for document in split_documents(text):
        yield from _decode_document(document, file_path)


def split_documents(text: str) -> list[str]:
    """Split a multi-document YAML stream on ``---`` separator lines.

    Content after the marker on a separator line (``--- {kind: Service}``)
    opens the next document; a trailing comment does not.

    Args:
        text: Raw YAML text.

    Returns:
        list[str]: Document bodies, blank ones included.
    """

    documents: list[str] = []
    current: list[str] = []
    for line in text.splitlines():
        match = _DOCUMENT_SEPARATOR.match(line)
        if match:
            documents.append("\n".join(current))
            rest = (match.group("rest") or "").strip()
            current = [rest] if rest and not rest.startswith("#") else []
            continue
        current.append(line)
    documents.append("\n".join(current))
    return documents


def _decode_document(document: str, file_path: str) -> Iterator[LintObject | InvalidObject]:
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as exc:
        yield _invalid(file_path, f"failed to parse YAML: {exc}")
        return
    if data is None:
        return
    if not isinstance(data, Mapping):
        yield _invalid(file_path, f"expected a mapping, found {type(data).__name__}")
        return
    if data.get("kind") == "List":
        items = data.get("items")
        if not isinstance(items, list):
            yield _invalid(file_path, "List object has no items")
            return
        for item in items:
            yield _to_object(item, file_path)
        return
    yield _to_object(data, file_path)


def _to_object(data: Any, file_path: str) -> LintObject | InvalidObject:
    if not isinstance(data, Mapping):
        return _invalid(file_path, f"expected a mapping, found {type(data).__name__}")
    for required in _REQUIRED_FIELDS:
        if not data.get(required):
            return _invalid(file_path, f"failed to decode: object '{required}' is missing")
    try:
        return LintObject(metadata=ObjectMetadata(file_path=file_path), k8s_object=dict(data))
    except ValidationError as exc:
        return _invalid(file_path, f"failed to decode: {exc}")


def _invalid(file_path: str, message: str) -> InvalidObject:
    return InvalidObject(metadata=ObjectMetadata(file_path=file_path), load_err=message)


__all__ = ["STDIN_PATH", "LintContext", "create_contexts", "split_documents"]
