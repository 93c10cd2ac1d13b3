"""A string-keyed hash table with FNV-1a hashing and linear probing."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

__all__ = ["DEFAULT_CAPACITY", "FNV_OFFSET", "FNV_PRIME", "FnvDict", "fnv_index"]

DEFAULT_CAPACITY = 32
FNV_OFFSET = 14695981039346656037
FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1

_Entry = Optional[Tuple[str, Any]]


def _signed_char_units(key: str):
    """Yield the UTF-8 bytes of ``key`` sign-extended to 64 bits."""
    for byte in key.encode("utf-8"):
        yield byte if byte < 128 else (byte - 256) & _MASK64


def fnv_index(key: str, capacity: int) -> int:
    """Return the slot for ``key`` in a table of ``capacity`` slots.

    ``capacity`` is expected to be a power of two; the 64-bit FNV-1a hash
    is masked with ``capacity - 1``.
    """
    hash_value = FNV_OFFSET
    for unit in _signed_char_units(key):
        hash_value ^= unit
        hash_value = (hash_value * FNV_PRIME) & _MASK64
    return hash_value & ((capacity - 1) & _MASK64)


def _insert(entries: List[_Entry], key: str, value: Any) -> bool:
    """Store ``key`` in ``entries``; return True when a new slot was used."""
    capacity = len(entries)
    index = fnv_index(key, capacity)
    while entries[index] is not None:
        existing_key, _ = entries[index]
        if existing_key == key:
            entries[index] = (key, value)
            return False
        index = (index + 1) % capacity
    entries[index] = (key, value)
    return True


class FnvDict:
    """Open-addressing table that doubles its capacity when half full."""

    def __init__(self) -> None:
        self._entries: List[_Entry] = [None] * DEFAULT_CAPACITY
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._entries)

    def _expand(self) -> None:
        new_entries: List[_Entry] = [None] * (len(self._entries) * 2)
        for entry in self._entries:
            if entry is not None:
                _insert(new_entries, *entry)
        self._entries = new_entries

    def _find(self, key: str) -> _Entry:
        capacity = len(self._entries)
        index = fnv_index(key, capacity)
        while self._entries[index] is not None:
            entry = self._entries[index]
            if entry[0] == key:
                return entry
            index = (index + 1) % capacity
        return None

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``, or None when absent."""
        entry = self._find(key)
        return None if entry is None else entry[1]

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if not isinstance(key, str):
            raise TypeError("keys must be strings")
        if self._length >= len(self._entries) // 2:
            self._expand()
        if _insert(self._entries, key, value):
            self._length += 1

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None