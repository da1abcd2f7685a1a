import pytest

from minipix.text import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
    word_count,
)


def test_strlen_counts_characters_and_none_is_zero():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0
    assert strlen(None) == 0


def test_strchr_finds_first_occurrence():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, ord("n")) == s.index("n")
    assert strchr(s, "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == 3
    assert strchr("", 0) == 0


def test_strrchr_finds_last_occurrence():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr(s, "x") is None
    assert strrchr(s, "\0") == len(s)


def test_strchr_rejects_multichar():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_within_limit():
    hay = "lorem ipsum dolor"
    assert strnstr(hay, "ipsum", len(hay)) == hay.index("ipsum")
    assert strnstr(hay, "ipsum", hay.index("ipsum") + len("ipsum")) == hay.index("ipsum")
    assert strnstr(hay, "ipsum", hay.index("ipsum") + len("ipsum") - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 10) is None


def test_substr_slices_and_past_end():
    s = "hello world"
    assert substr(s, 6, 5) == "world"
    assert substr(s, 6, 100) == s[6:]
    assert substr(s, len(s) + 1, 3) == ""
    assert substr(s, len(s), 3) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("  xx hello xx  ", " x") == "hello"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split(",,,", ",") == []


def test_split_rejoin_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_word_count_matches_split():
    s = "::a::bb:c:::"
    assert word_count(s, ":") == len(split(s, ":"))
    assert word_count("single", " ") == 1


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    assert strlcpy("old", src, 10) == (src, len(src))
    assert strlcpy("old", src, 3) == (src[:2], len(src))
    assert strlcpy("old", src, 1) == ("", len(src))


def test_strlcpy_zero_size_keeps_destination():
    assert strlcpy("keep", "hello", 0) == ("keep", len("hello"))


def test_strlcat_appends_within_size():
    assert strlcat("foo", "bar", 20) == ("foobar", len("foobar"))
    result, total = strlcat("foo", "bar", 5)
    assert result == "foo" + "bar"[:1]
    assert total == len("foo") + len("bar")


def test_strlcat_small_size_returns_size_plus_src():
    assert strlcat("foobar", "xyz", 4) == ("foobar", 4 + len("xyz"))


def test_strmapi_uses_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_replaces_or_keeps():
    seen = []

    def visit(i, c):
        seen.append((i, c))
        return "_" if c == " " else None

    assert striteri("a b c", visit) == "a_b_c"
    assert seen == list(enumerate("a b c"))