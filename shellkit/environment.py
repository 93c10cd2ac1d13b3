"""An ordered store of ``NAME=value`` environment entries."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from shellkit.ctype import isalnum, isdigit

__all__ = ["Environment", "is_valid_name", "name_length"]


def name_length(entry: str) -> int:
    """Return the length of the name part of ``entry`` (up to the first '=')."""
    index = entry.find("=")
    return len(entry) if index < 0 else index


def is_valid_name(entry: Optional[str]) -> bool:
    """Return whether ``entry`` starts with a usable variable name.

    The name must not begin with a digit or '=', and every character after
    the first, up to the first '=', must be alphanumeric or '_'.
    """
    if not entry:
        return False
    first = entry[0]
    if isdigit(first) or first == "=":
        return False
    name = entry[1:name_length(entry)]
    return all(isalnum(c) or c == "_" for c in name)


class Environment:
    """Environment entries kept in insertion order."""

    def __init__(self, envp: Iterable[str] = ()) -> None:
        self._entries: List[str] = []
        for entry in envp:
            self.append(entry)

    def append(self, entry: str) -> None:
        """Add ``entry`` at the end without looking for an existing name."""
        self._entries.append(entry)

    def _index_of(self, name: str) -> Optional[int]:
        wanted = name[:name_length(name)]
        for index, entry in enumerate(self._entries):
            if entry[:name_length(entry)] == wanted:
                return index
        return None

    def update(self, entry: str) -> None:
        """Set the variable named in ``entry``.

        An existing variable is replaced only when ``entry`` carries a
        value ('='); a new name is appended.
        """
        index = self._index_of(entry)
        if index is None:
            self.append(entry)
        elif "=" in entry:
            self._entries[index] = entry

    def remove(self, name: str) -> None:
        """Remove the first entry whose name is a prefix of ``name``."""
        for index, entry in enumerate(self._entries):
            if name.startswith(entry[:name_length(entry)]):
                del self._entries[index]
                return

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None if unset or without a value."""
        if name is None:
            return None
        index = self._index_of(name)
        if index is None:
            return None
        entry = self._entries[index]
        length = name_length(entry)
        if length < len(entry):
            return entry[length + 1:]
        return None

    def strings(self) -> List[str]:
        """Return a copy of the entries as ``NAME=value`` strings."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))