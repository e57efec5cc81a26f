from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

__all__ = [
    "Environment",
    "OsEnvironment",
    "MappingEnvironment",
    "default_environment",
]


class Environment(Protocol):
    """Read-only view of a process environment.

    `lookup` returns None for an unset variable; an empty string is a value.
    """

    def lookup(self, key: str) -> str | None: ...

    def items(self) -> Iterable[tuple[str, str]]: ...


class OsEnvironment:
    """The live process environment, read fresh on every call."""

    def lookup(self, key: str) -> str | None:
        return os.environ.get(key)

    def items(self) -> Iterator[tuple[str, str]]:
        # Snapshot so concurrent changes by the host cannot break iteration.
        return iter(list(os.environ.items()))


class MappingEnvironment:
    """An environment backed by a plain mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> MappingEnvironment:
        """Build from raw NAME=VALUE strings.

        The value is everything after the first "="; entries without one, or
        with an empty name, are skipped.
        """
        values: dict[str, str] = {}
        for entry in entries:
            name, sep, value = entry.partition("=")
            if not sep or not name:
                continue
            values[name] = value
        return cls(values)

    def lookup(self, key: str) -> str | None:
        return self._values.get(key)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._values.items()))


def default_environment() -> Environment:
    return OsEnvironment()
