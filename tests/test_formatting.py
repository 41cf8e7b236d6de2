"""
Display formatting tests: exact ties round half away from zero.
"""

import pytest

from backend.formatting import money0, money2, multiple, nights, pct


@pytest.mark.parametrize("value,expected", [
    (12500, "$12,500"),
    (150.5, "$151"),
    (2.5, "$3"),
    (1130500, "$1,130,500"),
])
def test_money0(value, expected):
    assert money0(value) == expected


@pytest.mark.parametrize("value,expected", [
    (4375, "$4,375.00"),
    (131.25, "$131.25"),
    (0.125, "$0.13"),
    (150.5, "$150.50"),
])
def test_money2(value, expected):
    assert money2(value) == expected


def test_nights_tie_rounds_up():
    assert nights(0.25) == "0.3"
    assert nights(2.5) == "2.5"
    assert nights(0.0) == "0.0"


def test_multiple_two_decimals():
    assert multiple(47.0) == "47.00x"
    assert multiple(0.125) == "0.13x"
    assert multiple(0) == "0.00x"


def test_pct_one_decimal():
    assert pct(587500 / 600000) == "97.9%"
    assert pct(0) == "0.0%"
    assert pct(0.5) == "50.0%"
