"""Text output helpers and a small printf-style formatter.

The formatter understands ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Any other conversion letter consumes one
argument and prints it as a character. A lone ``%`` at the end of the
format is dropped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_UINT32 = 1 << 32
_INT32_MIN = -(1 << 31)
_POINTER = 1 << 64
_NULL_TEXT = "(null)"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _stream(stream).write(str(n))


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return int(value)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _as_int32(value: Any) -> int:
    return (_as_int(value) - _INT32_MIN) % _UINT32 + _INT32_MIN


def _convert(op: str, args: Iterator[Any]) -> str:
    if op == "%":
        return "%"
    value = _next_arg(args)
    if op in ("d", "i"):
        return str(_as_int32(value))
    if op == "s":
        if value is None:
            return _NULL_TEXT
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return value
    if op == "u":
        return str(_as_int(value) % _UINT32)
    if op == "x":
        return f"{_as_int(value) % _UINT32:x}"
    if op == "X":
        return f"{_as_int(value) % _UINT32:X}"
    if op == "p":
        address = 0 if value is None else _as_int(value) % _POINTER
        return f"0x{address:x}"
    return _as_char(value)


def format(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text."""
    remaining = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        op = next(chars, None)
        if op is None:
            break
        pieces.append(_convert(op, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Render ``fmt`` with ``args``, write it, and return the characters written."""
    text = format(fmt, *args)
    _stream(stream).write(text)
    return len(text)