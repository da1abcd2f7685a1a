"""String helpers: length, search, comparison, slicing, joining and splitting."""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return a one-character string from a character or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal code points, or 0 when the
    strings agree up to ``n`` characters or to the end of ``s1``.
    """
    _check_non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset)


def word_count(s: str, sep: CharLike) -> int:
    """Number of maximal runs of characters other than ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    if not isinstance(s, str):
        raise TypeError("split expects a string")
    return [word for word in s.split(_char(sep)) if word]


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns the resulting string and the length of ``src``. With a size of 0
    nothing is written and ``dst`` comes back unchanged.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters (terminator included).

    Returns the resulting string and the length the full result would have.
    When ``size`` does not exceed ``len(dst)``, ``dst`` is returned unchanged
    with ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character.

    A string returned by ``func`` replaces the character; None keeps it.
    Returns the resulting string.
    """
    if s is None or func is None:
        return s
    out = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)