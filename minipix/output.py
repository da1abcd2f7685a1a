"""Formatted output and small writers for characters, strings and numbers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from minipix.chars import itoa

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _as_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(value).__name__}")


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    value = _next_arg(values, spec)
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_signed32(value))
    if spec == "u":
        return str(value & _UINT32)
    if spec == "x":
        return format(value & _UINT32, "x")
    if spec == "X":
        return format(value & _UINT32, "X")
    return "0x" + format(value & _UINT64, "x")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %d %i %u %x %X %p %%`` in ``fmt``.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end is dropped.  Missing arguments raise TypeError.
    """
    out = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_as_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(itoa(n))