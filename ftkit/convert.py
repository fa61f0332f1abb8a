"""Conversions between numbers and text, and word splitting."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT_MAX = 0xFFFFFFFF


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def atoi(s: str) -> int:
    """Parse a decimal integer at the start of ``s``.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Returns 0 when there are no digits.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def atoi_base(s: str, base: int) -> int:
    """Parse an unsigned number in ``base`` at the start of ``s``.

    Digits are ``0``-``9`` then upper-case ``A``-``Z``. Leading whitespace
    is skipped; parsing stops at the first character that is not a digit
    of ``base``. The result is reduced to 32 bits.
    """
    _check_base(base)
    value = 0
    for ch in s.lstrip(_WHITESPACE):
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
        elif "A" <= ch <= "Z":
            digit = ord(ch) - ord("A") + 10
        else:
            break
        if digit >= base:
            break
        value = value * base + digit
    return value & _UINT_MAX


def itoa(n: int) -> str:
    """Render ``n`` in decimal."""
    return str(n)


def itoa_hex(n: int, base: int) -> str:
    """Render the unsigned 32-bit ``n`` in ``base`` with lower-case digits."""
    _check_base(base)
    if not 0 <= n <= _UINT_MAX:
        raise ValueError(f"value must fit in an unsigned 32-bit integer, got {n}")
    digits = []
    while True:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
        if n == 0:
            break
    return "".join(reversed(digits))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]