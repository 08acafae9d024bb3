"""
Tests for input value coercion.
"""
import math

import pytest

from energiepilot.services.rule_engine.base import MISSING, is_truthy, to_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        (True, 1),
        (False, 0),
        (42, 42),
        (2.5, 2.5),
        ("", 0),
        ("  ", 0),
        (" 12 ", 12),
        ("-3.5", -3.5),
        ("1e3", 1000),
        (".5", 0.5),
        ("5.", 5),
        ("0x10", 16),
        ("0X1f", 31),
        ("0o17", 15),
        ("0b101", 5),
        ("Infinity", math.inf),
        ("+Infinity", math.inf),
        ("-Infinity", -math.inf),
        ([], 0),
        (["7"], 7),
        ([7], 7),
        ([None], 0),
        ([[8]], 8),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        MISSING,
        "abc",
        "inf",
        "-inf",
        "nan",
        "NaN",
        "infinity",
        "1_000",
        "-0x10",
        "0x",
        "0xg",
        "0b2",
        "12abc",
        "١٢",
        [1, 2],
        [True],
        {"a": 1},
    ],
)
def test_to_number_not_a_number(value):
    assert math.isnan(to_number(value))


def test_to_number_huge_integers_overflow_to_infinity():
    assert to_number(10**400) == math.inf
    assert to_number(-(10**400)) == -math.inf
    assert to_number([10**400]) == math.inf
    assert to_number("0x" + "f" * 300) == math.inf


@pytest.mark.parametrize("value", [1, -1, 0.5, 10**400, -(10**400), "x", [], {}])
def test_is_truthy(value):
    assert is_truthy(value) is True


@pytest.mark.parametrize("value", [MISSING, None, False, 0, 0.0, math.nan, ""])
def test_is_falsy(value):
    assert is_truthy(value) is False
