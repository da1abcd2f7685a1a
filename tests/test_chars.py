import string

import pytest

from minipix.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    itoa,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classification_matches_string_constants(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)
    assert is_space(ch) == (ch in " \t\n\v\f\r")
    assert is_print(ch) == (32 <= ord(ch) <= 126)


def test_int_arguments_are_accepted():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_alpha(ord("7"))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("ß")


@pytest.mark.parametrize("ch", ASCII)
def test_case_mapping_matches_ascii(ch):
    expected_lower = ch.lower() if ch in string.ascii_uppercase else ch
    expected_upper = ch.upper() if ch in string.ascii_lowercase else ch
    assert to_lower(ch) == expected_lower
    assert to_upper(ch) == expected_upper


def test_case_mapping_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_lower(ord("1")) == ord("1")


def test_case_mapping_leaves_non_ascii_alone():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        to_upper("")


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17") == 17
    assert atoi("123 456") == 123


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("++1") == 0
    assert atoi("- 5") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 100200300])
def test_itoa_atoi_round_trip(n):
    text = itoa(n)
    assert atoi(text) == n
    assert text == str(n)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.5)
    with pytest.raises(TypeError):
        itoa("3")