import pytest

from frontend.display import group_thousands


@pytest.mark.parametrize(
    "raw, shown",
    [
        ("0", "0"),
        ("999", "999"),
        ("1234567", "1,234,567"),
        ("-1234.50", "-1,234.50"),
        ("1234.", "1,234."),
        ("0.", "0."),
        ("-0", "-0"),
        ("0.30000000000000004", "0.30000000000000004"),
    ],
)
def test_group_thousands(raw, shown):
    assert group_thousands(raw) == shown


@pytest.mark.parametrize("raw", ["∞", "-∞", "NaN"])
def test_sentinels_pass_through(raw):
    assert group_thousands(raw) == raw
