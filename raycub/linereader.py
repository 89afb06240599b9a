"""Line-at-a-time reading from streams and file descriptors.

Lines are returned with their trailing newline, except a final line that
has none. ``None`` marks the end of input.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr, Optional

DEFAULT_BUFFER_SIZE = 4


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")


def _take_line(rest: AnyStr) -> tuple[Optional[AnyStr], AnyStr]:
    """Split the first line off ``rest``; None when ``rest`` is empty."""
    empty = rest[:0]
    if not rest:
        return None, empty
    newline = b"\n" if isinstance(rest, bytes) else "\n"
    index = rest.find(newline)
    if index < 0:
        return rest, empty
    return rest[:index + 1], rest[index + 1:]


def _has_newline(rest: Any) -> bool:
    if rest is None:
        return False
    return (b"\n" if isinstance(rest, bytes) else "\n") in rest


class LineReader:
    """Reads lines from a stream with a ``read(size)`` method.

    Text streams give ``str`` lines, binary streams give ``bytes``.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self._source = source
        self._buffer_size = buffer_size
        self._rest: Any = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None at the end of input."""
        rest = self._rest
        try:
            while not _has_newline(rest):
                chunk = self._source.read(self._buffer_size)
                if not chunk:
                    break
                rest = chunk if rest is None else rest + chunk
        except OSError:
            self._rest = None
            raise
        if rest is None:
            return None
        line, self._rest = _take_line(rest)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


class FdLineReader:
    """Reads byte lines from file descriptors, keeping separate state per fd."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self._buffer_size = buffer_size
        self._rest: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line read from ``fd``, or None at its end."""
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        rest = self._rest.pop(fd, b"")
        while b"\n" not in rest:
            try:
                chunk = os.read(fd, self._buffer_size)
            except OSError:
                raise
            if not chunk:
                break
            rest += chunk
        line, remainder = _take_line(rest)
        if remainder:
            self._rest[fd] = remainder
        return line