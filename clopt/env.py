"""Environment variables module from Clopt."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

ENTRY_SEPARATOR: str = "="


@dataclass(slots=True)
class MalformedEnvironmentEntry(Exception):
    """
    Clopt Exception class for environment entries that aren't 'NAME=value'.
    """

    msg: str
    entry: str = ""


class Environment:
    """
    Environment variables lookup. Names are case insensitive unless asked otherwise.
    """

    __slots__ = ("_vars",)

    _vars: dict[str, str]

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._vars = dict(os.environ if variables is None else variables)

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> Environment:
        """
        Builds an environment from 'NAME=value' strings (Example: an envp array).
        Raises `MalformedEnvironmentEntry` for an entry without '='.
        """
        variables: dict[str, str] = {}
        for entry in entries:
            line: str = entry.strip()
            if ENTRY_SEPARATOR not in line:
                raise MalformedEnvironmentEntry(
                    f"Environment entry without '{ENTRY_SEPARATOR}': '{line}'.", line
                )
            name, value = line.split(ENTRY_SEPARATOR, 1)
            variables[name.strip()] = value.strip()
        return cls(variables)

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def find(self, name: str, case_sensitive: bool = False) -> str | None:
        """
        Returns the real name of a variable, or None if it isn't set.
        """
        if name in self._vars:
            return name
        if case_sensitive:
            return None
        lowered: str = name.lower()
        for var_name in self._vars:
            if var_name.lower() == lowered:
                return var_name
        return None

    def exists(self, name: str, case_sensitive: bool = False) -> bool:
        return self.find(name, case_sensitive) is not None

    def get(self, name: str, case_sensitive: bool = False) -> str | None:
        var_name: str | None = self.find(name, case_sensitive)
        return None if var_name is None else self._vars[var_name]

    def get_list(self, name: str, separator: str = os.pathsep, case_sensitive: bool = False) -> list[str] | None:
        """
        Returns a list variable split on `separator`, without empty items.
        """
        value: str | None = self.get(name, case_sensitive)
        if value is None:
            return None
        return [item for item in value.split(separator) if item]

    def search_path(self, separator: str = os.pathsep) -> list[str]:
        """
        Returns the PATH directories. Raises KeyError if PATH isn't set.
        """
        path: list[str] | None = self.get_list("PATH", separator)
        if path is None:
            raise KeyError("PATH")
        return path

    def home(self) -> str:
        """
        Returns the HOME directory. Raises KeyError if HOME isn't set.
        """
        home: str | None = self.get("HOME")
        if home is None:
            raise KeyError("HOME")
        return home
