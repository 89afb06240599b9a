"""String helpers: splitting, trimming, searching and bounded copying."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the code difference of the first differing pair, treating the
    end of a string as code 0, or 0 when they match.
    """
    _check_non_negative(n=n)
    for index in range(n):
        ca = ord(a[index]) if index < len(a) else 0
        cb = ord(b[index]) if index < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` in the first ``length`` characters of
    ``haystack``, or None. An empty needle is found at 0."""
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the end.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative(size=size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had; when ``size`` does not exceed ``len(dst)`` nothing is appended and
    the length reported is ``len(src) + size``.
    """
    _check_non_negative(size=size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def for_each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each item of ``chars``.

    A non-None return value replaces the item in place.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement