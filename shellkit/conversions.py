"""Integer parsing and formatting with fixed-width integer semantics."""

from __future__ import annotations

__all__ = [
    "abs_value",
    "atoi",
    "atol",
    "itoa",
    "utoa",
    "itoa_base",
    "utoa_base",
    "ultoa_base",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DECIMAL = "0123456789"


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _parse_decimal(text: str) -> int:
    """Parse leading whitespace, an optional sign and a run of digits."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DECIMAL:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def abs_value(num: int) -> int:
    """Return the magnitude of ``num`` as an unsigned 32-bit value."""
    return _wrap_unsigned(-num if num < 0 else num, 32)


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text`` as a 32-bit signed int.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    return _wrap_signed(_parse_decimal(text), 32)


def atol(text: str) -> int:
    """Parse the leading decimal integer of ``text`` as a 64-bit signed long."""
    return _wrap_signed(_parse_decimal(text), 64)


def ultoa_base(num: int, base: str) -> str:
    """Format ``num`` as an unsigned 64-bit value using the digits in ``base``.

    Raises ValueError when ``base`` has fewer than two digits.
    """
    if not base or len(base) <= 1:
        raise ValueError("base must contain at least two digits")
    radix = len(base)
    num = _wrap_unsigned(num, 64)
    if num == 0:
        return base[0]
    digits = []
    while num > 0:
        num, rem = divmod(num, radix)
        digits.append(base[rem])
    return "".join(reversed(digits))


def utoa_base(num: int, base: str) -> str:
    """Format ``num`` as an unsigned 32-bit value using the digits in ``base``."""
    return ultoa_base(_wrap_unsigned(num, 32), base)


def utoa(num: int) -> str:
    """Format ``num`` as an unsigned 32-bit decimal number."""
    return utoa_base(num, _DECIMAL)


def itoa_base(num: int, base: str) -> str:
    """Format a signed 32-bit ``num`` using the digits in ``base``."""
    num = _wrap_signed(num, 32)
    if num < 0:
        return "-" + utoa_base(-num, base)
    return utoa_base(num, base)


def itoa(num: int) -> str:
    """Format a signed 32-bit ``num`` in decimal."""
    return itoa_base(num, _DECIMAL)