"""String searching, comparison, bounded copying and character mapping.

Searches return an index into the string, or ``None`` when nothing is found.
A string behaves as if it ended in a NUL terminator: searching for ``"\\0"``
finds the position just past the last character.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of the first ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or ``None``.

    An empty ``needle`` is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference between the codes of the first differing
    characters, the end of a string counting as code 0; 0 when equal.
    """
    _check_non_negative("n", n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    end = min(len(s1), len(s2))
    if end >= n:
        return 0
    return _code_at(s1, end) - _code_at(s2, end)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the
    terminator.

    Returns the copied text and ``len(src)``; truncation happened when the
    second value is at least ``size``.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed ``len(dst)``, ``dst`` is returned unchanged and
    the length is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for each character of the mutable sequence
    ``s`` and store any non-``None`` result back in place; return ``s``."""
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement
    return s