"""Reading XPM pixmaps, from a file or from in-memory string arrays."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from minipix.chars import atoi
from minipix.colors import lookup_color
from minipix.image import Image

TRANSPARENT_PIXEL = 0xFF000000
_DIRECT_TABLE_MAX_CPP = 2


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def _until_nul(text: str) -> str:
    cut = text.find("\0")
    return text if cut < 0 else text[:cut]


def find(text: str, needle: str) -> Optional[int]:
    """Index of the first ``needle`` in ``text`` before any NUL, or None."""
    if not needle:
        raise ValueError("needle must not be empty")
    index = _until_nul(text).find(needle)
    return None if index < 0 else index


def find_unquoted(text: str, needle: str) -> Optional[int]:
    """Index of the first ``needle`` that lies outside double-quoted text, or None."""
    if not needle:
        raise ValueError("needle must not be empty")
    text = _until_nul(text)
    quoted = False
    for pos, ch in enumerate(text[: len(text) - len(needle) + 1]):
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in text.replace("\t", " ").split(" ") if word]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    A line comment's newline is blanked too; an unterminated comment is
    blanked to the end of the text.
    """
    while (begin := find_unquoted(text, "/*")) is not None:
        end = find(text[begin + 2 :], "*/")
        stop = len(text) if end is None else begin + end + 4
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) is not None:
        end = find(text[begin + 2 :], "\n")
        stop = len(text) if end is None else begin + end + 3
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    text = _until_nul(text)
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete header: {line!r}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header values: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than its key: {line!r}")
    words = split_words(line[cpp:])
    try:
        spec_at = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour entry in {line!r}") from None
    if spec_at >= len(words):
        raise XpmError(f"empty colour entry in {line!r}")
    suffix = words[spec_at + 1] if spec_at + 1 < len(words) else None
    return line[:cpp], lookup_color(words[spec_at], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows.

    With one or two characters per pixel a later colour definition replaces
    an earlier one; with more, the first definition is kept.  Undefined keys
    give colour 0 and the colour ``None`` gives a pixel of 0xFF000000.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))
    direct = cpp <= _DIRECT_TABLE_MAX_CPP
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color(_next_line(source, "colour line"), cpp)
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from an in-memory XPM string array."""
    return parse_xpm(data)


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))