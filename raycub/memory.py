"""Byte-buffer helpers operating on bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (mod 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if src + n > len(buffer) or dest + n > len(buffer):
        raise ValueError("region exceeds buffer size")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) in the first
    ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    unequal pair, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0