"""Small output helpers and a buffered line reader over file descriptors."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, TextIO

from shellkit.conversions import itoa, utoa

__all__ = [
    "BUFFER_SIZE",
    "MAX_FD",
    "LineReader",
    "get_next_line",
    "put_char",
    "put_endl",
    "put_nbr",
    "put_str",
    "put_unbr",
]

BUFFER_SIZE = 1024
MAX_FD = 1024


def put_str(text: str, stream: TextIO) -> int:
    """Write ``text`` to ``stream`` and return the number of characters."""
    stream.write(text)
    return len(text)


def put_char(c: str, stream: TextIO) -> int:
    """Write a single character to ``stream``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    return put_str(c, stream)


def put_endl(text: str, stream: TextIO) -> int:
    """Write ``text`` followed by a newline."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(num: int, stream: TextIO) -> int:
    """Write ``num`` as a signed 32-bit decimal number."""
    return put_str(itoa(num), stream)


def put_unbr(num: int, stream: TextIO) -> int:
    """Write ``num`` as an unsigned 32-bit decimal number."""
    return put_str(utoa(num), stream)


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the final line of the input may
    lack one. ``readline`` returns None once the input is exhausted.
    """

    def __init__(self, fd: int) -> None:
        if fd < 0 or fd >= MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        self.fd = fd
        self._buffer = b""

    def readline(self) -> Optional[str]:
        """Return the next line, or None at end of input."""
        while b"\n" not in self._buffer:
            chunk = os.read(self.fd, BUFFER_SIZE)
            if not chunk:
                rest, self._buffer = self._buffer, b""
                return self._decode(rest) if rest else None
            self._buffer += chunk
        line, _, rest = self._buffer.partition(b"\n")
        self._buffer = rest
        return self._decode(line + b"\n")

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping a buffer per descriptor.

    Returns None at end of input or for a descriptor out of range.
    """
    if fd < 0 or fd >= MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.readline()
    if line is None:
        del _readers[fd]
    return line