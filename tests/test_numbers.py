import pytest

from sigtalk.numbers import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    itoa,
    parse_int,
    parse_long,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("-1", -1),
        ("0", 0),
        ("42tokyo", 42),
        ("tokyo42", 0),
        ("000042", 42),
        ("  -42", -42),
    ],
)
def test_parse_int_basic_cases(text, expected):
    assert parse_int(text) == expected


def test_parse_long_saturates():
    assert parse_long("9223372036854775808") == LONG_MAX
    assert parse_long("-9223372036854775809") == LONG_MIN
    assert parse_long("123456789012345678901234567890") == LONG_MAX
    assert parse_long("-123456789012345678901234567890") == LONG_MIN


def test_parse_long_keeps_values_in_range():
    assert parse_long("9223372036854775806") == 9223372036854775806
    assert parse_long("-9223372036854775807") == -9223372036854775807


def test_parse_int_truncates_like_a_cast():
    assert parse_int("9223372036854775806") == -2
    assert parse_int("9223372036854775808") == -1
    assert parse_int("-9223372036854775809") == 0


def test_parse_skips_all_c_whitespace_and_single_sign():
    assert parse_long("\t\n\v\f\r 17") == 17
    assert parse_long("+17") == 17
    assert parse_long("+-17") == 0
    assert parse_long("") == 0


def test_unicode_digits_are_not_digits():
    assert parse_long("\u0663") == 0


def test_itoa_limits_and_samples():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"
    assert itoa(42) == "42"
    assert itoa(-42) == "-42"
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [INT_MIN, -1000, -1, 0, 1, 7, 99999, INT_MAX])
def test_itoa_parse_int_round_trip(n):
    assert parse_int(itoa(n)) == n


def test_itoa_rejects_values_outside_int():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)