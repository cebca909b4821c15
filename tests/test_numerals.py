import math

import pytest

from backend.numerals import format_number, is_finite_numeral, parse_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (16.0, "16"),
        (0.4, "0.4"),
        (-2.0, "-2"),
        (-0.0, "-0"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (0.1 + 0.2, "0.30000000000000004"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_non_finite():
    assert format_number(math.inf) == "∞"
    assert format_number(-math.inf) == "-∞"
    assert format_number(math.nan) == "NaN"


def test_parse_number_accepts_partial_decimal():
    assert parse_number("0.") == 0.0
    assert parse_number("-12.5") == -12.5


def test_is_finite_numeral():
    assert is_finite_numeral("12")
    assert not is_finite_numeral("∞")
    assert not is_finite_numeral("-∞")
    assert not is_finite_numeral("NaN")
