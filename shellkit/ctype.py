"""ASCII character classification that ignores the locale."""

from __future__ import annotations

import enum
from typing import Union

__all__ = [
    "CharClass",
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "isspace",
    "toupper",
    "tolower",
]

CharLike = Union[int, str]


class CharClass(enum.IntFlag):
    """Flags returned by the classification predicates."""

    NONE = 0
    ALNUM = 1 << 3
    ALPHA = 1 << 10
    DIGIT = 1 << 11
    SPACE = 1 << 13
    PRINT = 1 << 14


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _in_range(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def isalpha(c: CharLike) -> CharClass:
    """Return ``CharClass.ALPHA`` for an ASCII letter, else ``CharClass.NONE``."""
    code = _code(c)
    if _in_range(code, "a", "z") or _in_range(code, "A", "Z"):
        return CharClass.ALPHA
    return CharClass.NONE


def isdigit(c: CharLike) -> CharClass:
    """Return ``CharClass.DIGIT`` for an ASCII decimal digit."""
    if _in_range(_code(c), "0", "9"):
        return CharClass.DIGIT
    return CharClass.NONE


def isalnum(c: CharLike) -> CharClass:
    """Return ``CharClass.ALNUM`` for an ASCII letter or digit."""
    if isalpha(c) or isdigit(c):
        return CharClass.ALNUM
    return CharClass.NONE


def isascii(c: CharLike) -> bool:
    """Return whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> CharClass:
    """Return ``CharClass.PRINT`` for a printable ASCII character."""
    if _in_range(_code(c), " ", "~"):
        return CharClass.PRINT
    return CharClass.NONE


def isspace(c: CharLike) -> CharClass:
    """Return ``CharClass.SPACE`` for space, tab, newline, VT, FF or CR."""
    code = _code(c)
    if 9 <= code <= 13 or code == ord(" "):
        return CharClass.SPACE
    return CharClass.NONE


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; other values pass through unchanged."""
    code = _code(c)
    if _in_range(code, "a", "z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; other values pass through unchanged."""
    code = _code(c)
    if _in_range(code, "A", "Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code