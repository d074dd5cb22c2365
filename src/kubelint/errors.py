# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by every stage of the lint pipeline."""

from __future__ import annotations

from typing import Final

EXIT_FINDINGS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2


class KubeLintError(RuntimeError):
    """Base error carrying the process exit status associated with the failure."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        """Initialise the error with a message and optional exit code override.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status overriding the class default.
        """

        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(KubeLintError):
    """Raised when the configuration file or flags are missing or invalid."""


class RegistryError(KubeLintError):
    """Raised for duplicate, unknown, or malformed check definitions."""


class LoadError(KubeLintError):
    """Raised when an input path cannot be accessed."""


class ExecutionError(KubeLintError):
    """Raised when the run engine fails internally."""


class FormatError(KubeLintError):
    """Raised for unknown output formats or failed output writes."""


class LintFindingsError(KubeLintError):
    """Terminal signal raised when a run produced one or more reports."""

    exit_code = EXIT_FINDINGS

    def __init__(self, count: int) -> None:
        """Record the number of reports found by the run.

        Args:
            count: Number of lint reports produced.
        """

        super().__init__(f"found {count} lint errors")
        self.count = count


__all__ = [
    "EXIT_FAILURE",
    "EXIT_FINDINGS",
    "ConfigError",
    "ExecutionError",
    "FormatError",
    "KubeLintError",
    "LintFindingsError",
    "LoadError",
    "RegistryError",
]
