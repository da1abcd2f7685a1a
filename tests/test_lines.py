import io

import pytest

from minipix.lines import LineReader


def _expected(text):
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


@pytest.mark.parametrize("size", [1, 2, 4, 7, 100])
@pytest.mark.parametrize(
    "text",
    ["a\nbb\n\nccc", "x\n", "no newline", "\n\n", "one\ntwo\nthree\n"],
)
def test_lines_match_split(text, size):
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == _expected(text)


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_read_line_sequence_then_none():
    reader = LineReader(io.StringIO("first\nsecond"))
    assert reader.read_line() == "first"
    assert reader.read_line() == "second"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_trailing_newline_no_extra_line():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None


def test_bytes_stream():
    data = b"alpha\nbeta\n"
    reader = LineReader(io.BytesIO(data), 3)
    assert list(reader) == [b"alpha", b"beta"]


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_default_buffer_size_reads_long_lines():
    line = "z" * 50
    reader = LineReader(io.StringIO(line + "\n" + line))
    assert list(reader) == [line, line]


def test_lines_rejoin_to_original():
    text = "a b\n\nc\nd e f"
    assert "\n".join(LineReader(io.StringIO(text), 3)) == text