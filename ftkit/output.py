"""Writing characters, strings and numbers straight to file descriptors.

Every function writes with :func:`os.write`. Each one returns the number of
characters it wrote.
"""

from __future__ import annotations

import enum
import os

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class HexStyle(enum.Enum):
    """How :func:`putnbr_hex_fd` renders a number."""

    LOWER = 1
    UPPER = 2
    POINTER = 3


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: str, fd: int) -> int:
    """Write the single character ``c`` to ``fd``; return 1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _write_all(fd, c.encode())
    return 1


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd``; return the number of bytes written."""
    return _write_all(fd, s.encode())


def putendl_fd(s: str, fd: int) -> int:
    """Write ``s`` and a newline to ``fd``; return the number of bytes written."""
    return _write_all(fd, (s + "\n").encode())


def putnbr_fd(n: int, fd: int) -> int:
    """Write ``n`` in decimal to ``fd``; return the number of characters written."""
    return putstr_fd(str(n), fd)


def _to_hex(n: int, upper: bool) -> str:
    digits = []
    while True:
        n, rem = divmod(n, 16)
        digits.append(_DIGITS[rem])
        if n == 0:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def putnbr_hex_fd(n: int, fd: int, style: HexStyle = HexStyle.LOWER) -> int:
    """Write the non-negative ``n`` in hexadecimal to ``fd``.

    ``HexStyle.POINTER`` prefixes ``0x`` and writes ``(nil)`` for zero.
    Returns the number of characters written.
    """
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    style = HexStyle(style)
    if style is HexStyle.POINTER:
        text = "(nil)" if n == 0 else "0x" + _to_hex(n, upper=False)
    else:
        text = _to_hex(n, upper=style is HexStyle.UPPER)
    return putstr_fd(text, fd)