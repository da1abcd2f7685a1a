import pytest

from minipix.xpm import (
    XpmError,
    find,
    find_unquoted,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c ghost white",
// pixels follow
" .X",
"X. "
};
"""


def test_find_basic():
    assert find("abcabc", "ca") == 2
    assert find("abc", "d") is None


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd") is None


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "")


def test_find_unquoted_skips_quoted_text():
    assert find_unquoted('"/*" /*', "/*") == 5
    assert find_unquoted('a"b"b', "b") == 4
    assert find_unquoted('"b"', "b") is None


def test_split_words():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]
    assert split_words("a\nb") == ["a\nb"]
    assert split_words(" \t ") == []


def test_strip_block_comment():
    assert strip_comments("x/* y */z") == "x" + " " * 7 + "z"


def test_strip_line_comment_blanks_newline():
    assert strip_comments("a // b\nc") == "a " + " " * 5 + "c"


def test_strip_comments_keeps_quoted_text():
    assert strip_comments('"/* k */"') == '"/* k */"'


def test_quoted_lines():
    assert list(quoted_lines('x "ab" y "c"')) == ["ab", "c"]
    assert list(quoted_lines('"a" "b')) == ["a"]


def test_xpm_to_image_one_char_per_pixel():
    img = xpm_to_image(["3 2 3 1", "  c None", ". c #FF0000", "X c ghost white", " .X", "X. "])
    assert (img.width, img.height) == (3, 2)
    assert img.get_pixel(0, 0) == 0xFF000000
    assert img.get_pixel(1, 0) == 0xFF0000
    assert img.get_pixel(2, 0) == 0xF8F8FF
    assert img.get_pixel(0, 1) == 0xF8F8FF
    assert img.get_pixel(2, 1) == 0xFF000000


def test_xpm_two_chars_per_pixel():
    img = xpm_to_image(["2 1 2 2", "aa c #000001", "bb c blue", "aabb"])
    assert [img.get_pixel(0, 0), img.get_pixel(1, 0)] == [1, 0xFF]


def test_direct_table_last_definition_wins():
    img = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert img.get_pixel(0, 0) == 2


def test_palette_first_definition_wins_for_wide_keys():
    img = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert img.get_pixel(0, 0) == 1


def test_undefined_key_gives_zero():
    img = parse_xpm(["2 1 1 3", "abc c #123456", "abczzz"])
    assert img.get_pixel(0, 0) == 0x123456
    assert img.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_xpm(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    img = xpm_file_to_image(path)
    assert (img.width, img.height) == (3, 2)
    assert img.get_pixel(1, 0) == 0xFF0000
    assert img.get_pixel(1, 1) == 0xFF0000
    assert img.get_pixel(0, 1) == 0xF8F8FF


def test_xpm_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")