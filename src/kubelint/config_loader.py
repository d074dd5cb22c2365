# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence: defaults, config file, then flags."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from .config import Config
from .errors import ConfigError

DEFAULT_CONFIG_NAMES: Final[tuple[str, ...]] = (".kube-linter.yaml", ".kube-linter.yml")

# snake_case spellings accepted in the ``checks`` section, keyed to their aliases.
_CHECKS_ALIASES: Final[dict[str, str]] = {
    "add_all_builtin": "addAllBuiltIn",
    "do_not_auto_add_defaults": "doNotAutoAddDefaults",
    "ignore_paths": "ignorePaths",
}

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlagOverrides:
    """Values supplied on the command line; ``None`` marks an unset flag."""

    add_all_builtin: bool | None = None
    do_not_auto_add_defaults: bool | None = None
    include: tuple[str, ...] | None = None
    exclude: tuple[str, ...] | None = None
    ignore_paths: tuple[str, ...] | None = None

    def as_fragment(self) -> dict[str, Any]:
        """Return the explicitly supplied flags as a config fragment.

        Returns:
            dict[str, Any]: Mapping shaped like the config file containing
            only the flags that were set.
        """

        checks: dict[str, Any] = {}
        if self.add_all_builtin is not None:
            checks["addAllBuiltIn"] = self.add_all_builtin
        if self.do_not_auto_add_defaults is not None:
            checks["doNotAutoAddDefaults"] = self.do_not_auto_add_defaults
        if self.include is not None:
            checks["include"] = list(self.include)
        if self.exclude is not None:
            checks["exclude"] = list(self.exclude)
        if self.ignore_paths is not None:
            checks["ignorePaths"] = list(self.ignore_paths)
        return {"checks": checks} if checks else {}


def load_config(
    flags: FlagOverrides | None = None,
    path: Path | None = None,
    *,
    search_dir: Path | None = None,
) -> Config:
    """Resolve the effective configuration.

    Args:
        flags: Command-line overrides; unset flags leave file values alone.
        path: Explicit config file. When ``None``, ``.kube-linter.yaml`` or
            ``.kube-linter.yml`` in ``search_dir`` is used if present.
        search_dir: Directory searched for a default config file; defaults to
            the current working directory.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the file is missing, unparsable, or fails validation.
    """

    config_path = path if path is not None else _discover_default(search_dir or Path.cwd())
    file_data: dict[str, Any] = {}
    source = "defaults"
    if config_path is not None:
        file_data = _read_config_file(config_path, explicit=path is not None)
        source = str(config_path)
    merged = _deep_merge(file_data, (flags or FlagOverrides()).as_fragment())
    try:
        config = Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {source}: {exc}") from exc
    _LOG.debug("loaded configuration from %s", source)
    return config


def _discover_default(directory: Path) -> Path | None:
    for name in DEFAULT_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _read_config_file(path: Path, *, explicit: bool) -> dict[str, Any]:
    """Return the parsed contents of ``path`` as a mapping.

    Raises:
        ConfigError: If the file cannot be read or does not hold a mapping.
    """

    if explicit and not path.is_file():
        raise ConfigError(f"config file {path} not found")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"unable to read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"unable to parse config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"config file {path} must contain a mapping at the top level")
    normalised = dict(data)
    checks = normalised.get("checks")
    if isinstance(checks, Mapping):
        normalised["checks"] = {_CHECKS_ALIASES.get(key, key): value for key, value in checks.items()}
    return normalised


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


__all__ = ["DEFAULT_CONFIG_NAMES", "FlagOverrides", "load_config"]
