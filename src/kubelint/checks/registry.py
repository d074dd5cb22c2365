# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check registry providing lookup by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from ..errors import RegistryError
from .base import CheckDefinition


class CheckRegistry(Mapping[str, CheckDefinition]):
    """Registry of check definitions for one invocation.

    ``CheckRegistry`` behaves like a read-only mapping whose keys are check
    names and whose values are :class:`CheckDefinition` instances. The only
    mutator is :meth:`register`, which is used while assembling builtin and
    custom checks; the pipeline never mutates a registry after enablement has
    been resolved.
    """

    def __init__(self) -> None:
        """Initialise an empty check registry."""

        self._checks: dict[str, CheckDefinition] = {}

    def register(self, check: CheckDefinition) -> None:
        """Register ``check`` enforcing uniqueness by name.

        Args:
            check: Check definition to insert into the registry.

        Raises:
            RegistryError: If a check with the same name is already registered.
        """

        if check.name in self._checks:
            raise RegistryError(f'duplicate check name: "{check.name}"')
        self._checks[check.name] = check

    def try_get(self, name: str) -> CheckDefinition | None:
        """Return the check named ``name`` when registered, otherwise ``None``."""

        return self._checks.get(name)

    def checks(self) -> Iterable[CheckDefinition]:
        """Return all registered checks sorted by name."""

        return tuple(self._checks[name] for name in sorted(self._checks))

    def builtin_names(self) -> frozenset[str]:
        """Return the names of every builtin check."""

        return frozenset(name for name, check in self._checks.items() if check.builtin)

    def __len__(self) -> int:
        """Return the number of registered checks."""

        return len(self._checks)

    def __iter__(self) -> Iterator[str]:
        """Iterate over check names in sorted order."""

        return iter(sorted(self._checks))

    def __getitem__(self, name: str) -> CheckDefinition:
        """Return the check identified by ``name``.

        Raises:
            KeyError: If ``name`` does not refer to a registered check.
        """

        return self._checks[name]


__all__ = ["CheckRegistry"]
