import io

import pytest

from knightquest.printf import (
    hex_length,
    number_length,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
    sprintf,
    unsigned_length,
)


@pytest.mark.parametrize("value", [0, 7, -1, -9, 42, 2147483647, -2147483648])
def test_decimal_matches_str(value):
    assert sprintf("%d", value) == str(value)
    assert sprintf("%i", value) == str(value)


def test_decimal_wraps_to_int():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_text_around_conversion_kept():
    assert sprintf("test d: %d\n", -1) == "test d: -1\n"


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -9) == str(2**32 - 9)


@pytest.mark.parametrize("value", [0, 15, 1813, 0xDEADBEEF])
def test_hex_lower_and_upper(value):
    assert sprintf("%x", value) == format(value, "x")
    assert sprintf("%X", value) == format(value, "X")


def test_char_from_str_and_int():
    assert sprintf("test c: %c", "t") == "test c: t"
    assert sprintf("%c", ord("Z")) == "Z"


def test_null_string_and_pointer():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_hex():
    assert sprintf("%p", 255) == "0x" + format(255, "x")


def test_percent_and_unknown_conversion():
    assert sprintf("%%") == "%"
    assert sprintf("a%qb") == "a%qb"


def test_trailing_percent_dropped():
    assert sprintf("50%") == "50"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d (%x)", "answer", 42, 42, stream=out)
    assert out.getvalue() == sprintf("%s=%d (%x)", "answer", 42, 42)
    assert count == len(out.getvalue())


@pytest.mark.parametrize("value", [0, 9, 10, -10, 123456, -2147483648])
def test_number_length_matches_str(value):
    assert number_length(value) == len(str(value))


@pytest.mark.parametrize("value", [0, 15, 16, 4294967295])
def test_hex_and_unsigned_lengths(value):
    assert hex_length(value) == len(format(value, "x"))
    assert unsigned_length(value) == len(str(value))


def test_lengths_reject_negative():
    with pytest.raises(ValueError):
        unsigned_length(-1)
    with pytest.raises(ValueError):
        hex_length(-1)


def test_put_functions():
    out = io.StringIO()
    assert put_char("B", out) == 1
    assert put_str("Bonjour", out) == len("Bonjour")
    assert put_str(None, out) == len("(null)")
    assert put_nbr(-1234, out) == len("-1234")
    assert put_endl("end", out) == len("end\n")
    assert out.getvalue() == "BBonjour(null)-1234end\n"