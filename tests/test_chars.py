import string

import pytest

from knightquest import chars


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert chars.is_alpha(c) is True
    assert chars.is_alnum(c) is True
    assert chars.is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert chars.is_digit(c) is True
    assert chars.is_alnum(c) is True
    assert chars.is_alpha(c) is False


@pytest.mark.parametrize("c", ["/", " ", "@", "[", "`", "{", ":"])
def test_punctuation_is_not_alnum(c):
    assert chars.is_alnum(c) is False
    assert chars.is_alpha(c) is False
    assert chars.is_digit(c) is False


def test_int_arguments_match_str_arguments():
    for code in range(128):
        assert chars.is_alpha(code) == chars.is_alpha(chr(code))
        assert chars.is_print(code) == chars.is_print(chr(code))


def test_is_ascii_bounds():
    assert chars.is_ascii(0) is True
    assert chars.is_ascii(127) is True
    assert chars.is_ascii(128) is False
    assert chars.is_ascii(-1) is False
    assert chars.is_ascii(1649) is False


def test_is_print_matches_printable_range():
    printable = {c for c in range(256) if chars.is_print(c)}
    assert printable == {ord(c) for c in string.printable if c not in string.whitespace} | {ord(" ")}


def test_case_conversion_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert chars.to_upper(lower) == upper
        assert chars.to_lower(upper) == lower


@pytest.mark.parametrize("c", ["/", "1", " ", "~"])
def test_case_conversion_leaves_others(c):
    assert chars.to_upper(c) == c
    assert chars.to_lower(c) == c


def test_case_conversion_keeps_int_type():
    assert chars.to_upper(ord("a")) == ord("A")
    assert chars.to_lower(ord("A")) == ord("a")


def test_bad_argument_type():
    with pytest.raises(TypeError):
        chars.is_alpha(1.5)
    with pytest.raises(TypeError):
        chars.is_digit("12")


def test_atoi_double_sign_gives_zero():
    assert chars.atoi("  \t \t\t --1234") == 0


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert chars.atoi(" \t\n\v\f\r-1234abc") == int("-1234")
    assert chars.atoi("+77x9") == int("77")


def test_atoi_no_digits():
    assert chars.atoi("abc") == 0
    assert chars.atoi("") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 123456789])
def test_itoa_round_trip(n):
    text = chars.itoa(n)
    assert text == str(n)
    assert chars.atoi(text) == n