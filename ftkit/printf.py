"""Formatted output with the conversions ``c s d i u p x X``.

Any other character after ``%`` (``%`` itself included) produces a single
``%`` and is consumed. ``%d``, ``%i``, ``%u``, ``%x`` and ``%X`` take
32-bit values, wrapping those outside the range; ``%p`` takes a 64-bit
address and prints ``(nil)`` for zero or ``None``; ``%s`` prints
``(null)`` for ``None``.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Iterator
from typing import Any

from ftkit.output import putstr_fd

_SPEC = re.compile(r"%(.?)", re.DOTALL)
_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}") from None


def _to_int32(n: int) -> int:
    n %= _UINT32
    return n - _UINT32 if n >= _UINT32 // 2 else n


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") % _UINT64
    return "(nil)" if address == 0 else f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec not in "csdiupxX" or not spec:
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number % _UINT32
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Raises ``TypeError`` when there are fewer arguments than conversions.
    Extra arguments are ignored.
    """
    remaining = iter(args)
    return _SPEC.sub(lambda match: _convert(match.group(1), remaining), fmt)


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf` and write the result to ``fd``.

    Returns the number of bytes written.
    """
    return putstr_fd(sprintf(fmt, *args), fd)


def printf(fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf` and write the result to standard output."""
    return dprintf(1, fmt, *args)