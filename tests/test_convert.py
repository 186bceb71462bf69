import pytest

from minishell.convert import atoi, atoll, itoa, utoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n\v\f\r+17", 17),
        ("-21455454fs221545", -21455454),
        ("", 0),
        ("abc", 0),
        ("+-5", 0),
        ("--5", 0),
        ("- 5", 0),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoll_limits():
    assert atoll("9223372036854775807") == 9223372036854775807
    assert atoll("-9223372036854775808") == -9223372036854775808


def test_atoll_wraps_past_limit():
    assert atoll("9223372036854775808") == -9223372036854775808


def test_atoll_keeps_values_atoi_would_wrap():
    assert atoll("4444444444") == 4444444444
    assert atoi("4444444444") != 4444444444


def test_atoi_none_raises():
    with pytest.raises(TypeError):
        atoi(None)


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_known_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


@pytest.mark.parametrize("n", [0, 7, 100, 4294967295])
def test_utoa_round_trip(n):
    assert int(utoa(n)) == n
    assert atoll(utoa(n)) == n


@pytest.mark.parametrize("n", [-1, 2**32])
def test_utoa_out_of_range(n):
    with pytest.raises(OverflowError):
        utoa(n)