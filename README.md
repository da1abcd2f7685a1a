# minipix

`minipix` is a small library with no dependencies outside the standard library. It covers two areas.

- **Low-level helpers**
  - `minipix.chars`: ASCII character classification, case mapping, `atoi` and `itoa`.
  - `minipix.memory`: byte-buffer operations on `bytearray` and `memoryview`.
  - `minipix.text`: C-style string functions that return indices and new strings.
  - `minipix.linked`: `LinkedList`, a singly linked list.
  - `minipix.output`: printf-style formatting and small writers.
  - `minipix.lines`: `LineReader`, which reads a stream line by line in fixed-size chunks.
- **Pixel images**
  - `minipix.colors`: X11 colour names and conversion of colours to lower-depth pixel values.
  - `minipix.image`: `Image`, an in-memory pixel buffer with padded rows, and `rgb_shifts`.
  - `minipix.xpm`: an XPM loader that reads from files or from in-memory string lists.

## What it does not do

Images exist only in memory. The package does not open windows, draw to a display, or handle keyboard and mouse events. It does not run an event loop. It also does not write image files. To show an `Image`, copy its `data` bytes into a toolkit of your choice.

## Installation

```
pip install minipix
```

To install the test dependencies as well:

```
pip install "minipix[test]"
```

## Characters and numbers

```python
from minipix.chars import atoi, itoa, is_digit, to_upper

atoi("  -42abc")    # -42 (skips leading whitespace, reads one sign, stops at a non-digit)
itoa(-2147483648)   # "-2147483648"
is_digit(ord("7"))  # True; the classifiers accept a code point or a one-character string
to_upper("a")       # "A"
```

## Memory

```python
from minipix.memory import calloc, memset, memchr, memcmp, memmove

buf = calloc(4, 2)          # bytearray of 8 zero bytes
memset(buf, 0xAB, 3)
memchr(buf, 0xAB, 8)        # 0
memcmp(b"abc", b"abd", 3)   # -1
memmove(buf, buf[2:], 4)    # the regions may overlap
```

`calloc` raises `MemoryError` when `count * size` would exceed 2147483647. A negative length, or a length longer than a buffer, raises `ValueError`.

## Strings

```python
from minipix.text import split, strtrim, substr, strchr, strlcpy, strlcat

split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
substr("raycaster", 3, 4)       # "cast"
strchr("map.cub", ".")          # 3 (None when not found)
strlcpy("", "texture", 4)       # ("tex", 7)
strlcat("ab", "cdef", 5)        # ("abcd", 6)
```

The search functions return an index or `None`. `strlcpy` and `strlcat` return a pair: the resulting string, and the length the full result would have had.

## Linked list

```python
from minipix.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
list(items)                          # [0, 1, 2, 3, 4]
len(items)                           # 5
items.last()                         # 4
doubled = items.map(lambda v: v * 2, None)
items.clear(print)                   # passes each content to the callback, then empties the list
```

If the function given to `map` raises, the values mapped so far are passed to the `delete` callback. The exception then propagates.

## Formatted output

```python
import io
from minipix.output import format_printf, printf, put_endl, put_nbr

format_printf("%s is %d (%x)", "answer", 42, 42)  # "answer is 42 (2a)"
printf("%c%c\n", "o", "k")                        # writes "ok\n" to stdout, returns 3

out = io.StringIO()
put_endl("hello", out)
put_nbr(-17, out)
out.getvalue()                                    # "hello\n-17"
```

`format_printf` understands `%c %s %d %i %u %x %X %p %%`:

- Unknown conversions produce nothing.
- `%s` with `None` gives `(null)`.
- Too few arguments raise `TypeError`.

`put_char`, `put_str`, `put_endl` and `put_nbr` write to standard output when no stream is given.

## Reading lines

```python
import io
from minipix.lines import LineReader

reader = LineReader(io.StringIO("first\nsecond\n"), 4)
reader.read_line()   # "first"
list(reader)         # ["second"]
reader.read_line()   # None
```

Lines come back without their newline. Text and binary streams both work, and the default buffer size is 4.

## Colours

```python
from minipix.colors import lookup_color, get_good_color
from minipix.image import rgb_shifts

lookup_color("light", "blue")   # 0xADD8E6
lookup_color("#ff8800", None)   # 0xFF8800
lookup_color("None", None)      # -1
lookup_color("unknown", None)   # 0

shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)  # (11, 5, 5, 6, 0, 5)
get_good_color(0xFF0000, 16, shifts)         # 0xF800
get_good_color(0xFF0000, 24, shifts)         # 0xFF0000 (unchanged at depth 24 and above)
```

Colour names are matched case-insensitively.

## Images and XPM

```python
from minipix.image import Image
from minipix.xpm import xpm_file_to_image, xpm_to_image

img = Image(4, 4, 32, 0)        # width, height, bits per pixel, byte order (0 = LSB first)
img.set_pixel(1, 2, 0x00FF00)
img.get_pixel(1, 2)             # 0x00FF00
img.size_line                   # 16 bytes per row, padded to 32 bits
img.data                        # the raw bytearray

sprite = xpm_to_image([
    "2 2 2 1",
    ". c black",
    "# c white",
    ".#",
    "#.",
])
sprite.get_pixel(1, 0)          # 0xFFFFFF

texture = xpm_file_to_image("wall.xpm")
```

`Image` supports 8, 16, 24 and 32 bits per pixel. Coordinates outside the image raise `IndexError`.

When loading XPM data:

- Comments are stripped from files before the quoted strings are read.
- The colour `None` becomes the pixel value `0xFF000000`.
- Pixel keys that have no colour definition become `0`.

Malformed XPM data raises `minipix.xpm.XpmError`, a subclass of `ValueError`. The lower-level helpers `find`, `find_unquoted`, `split_words`, `strip_comments`, `quoted_lines` and `parse_xpm` are public as well.

## Running the tests

```
pytest
```