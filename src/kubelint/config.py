# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the kubelint pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .checks.base import CheckSpec
from .errors import ConfigError


class ChecksConfig(BaseModel):
    """Which checks run and which inputs are skipped."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    add_all_builtin: bool = Field(default=False, alias="addAllBuiltIn")
    do_not_auto_add_defaults: bool = Field(default=False, alias="doNotAutoAddDefaults")
    include: tuple[str, ...] = Field(default_factory=tuple)
    exclude: tuple[str, ...] = Field(default_factory=tuple)
    ignore_paths: tuple[str, ...] = Field(default_factory=tuple, alias="ignorePaths")


class Config(BaseModel):
    """Effective configuration for one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    checks: ChecksConfig = Field(default_factory=ChecksConfig)
    custom_checks: tuple[CheckSpec, ...] = Field(default_factory=tuple, alias="customChecks")


__all__ = ["ChecksConfig", "Config", "ConfigError"]
