"""Byte-buffer operations on bytes-like objects.

Writing functions take a mutable buffer (``bytearray`` or a writable
``memoryview``), change it in place and return it. A byte count larger
than a buffer raises ``ValueError`` instead of running past its end.
"""

from __future__ import annotations

from typing import TypeVar

Buffer = TypeVar("Buffer", bytearray, memoryview)


def _check_count(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")  # type: ignore[arg-type]


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy ``n`` bytes like :func:`memcpy`, safely when the buffers overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of ``c``
    within the first ``n`` bytes of ``data``, or ``None``."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first ``n`` bytes as unsigned values; return -1, 0 or 1."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return 1 if a > b else -1
    return 0