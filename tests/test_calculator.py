"""
Tests for claim total calculation.

Verifies that compute_total():
- Multiplies hours by rate and rounds for display
- Falls back to 0.00 for blank or malformed input instead of failing
"""

from decimal import Decimal

import pytest

from src.claims.calculator import compute_total, format_amount, parse_number


# ============================================================================
# compute_total
# ============================================================================


@pytest.mark.parametrize(
    "hours, rate, expected",
    [
        ("40", "75", 3000.00),
        ("35.5", "80", 2840.00),
        (40, 75, 3000.00),
        (" 7.5 ", "20", 150.00),
        ("2", "-10", -20.00),
    ],
)
def test_compute_total_parses_inputs(hours, rate, expected):
    assert compute_total(hours, rate) == pytest.approx(expected)


@pytest.mark.parametrize(
    "hours, rate",
    [
        ("", "75"),
        ("abc", "10"),
        ("40", ""),
        ("4..0", "10"),
        (None, "10"),
        ("nan", "10"),
        ("inf", "10"),
    ],
)
def test_compute_total_falls_back_to_zero(hours, rate):
    assert compute_total(hours, rate) == 0.0


def test_compute_total_overflow_falls_back_to_zero():
    assert compute_total("1e308", "10") == 0.0


def test_compute_total_rounds_to_cents():
    """Preview rounds, unlike the stored total."""
    assert compute_total("3.333", "3") == 10.0
    assert compute_total("0.1", "0.2") == 0.02


# ============================================================================
# parse_number / format_amount
# ============================================================================


def test_parse_number_accepts_numeric_types():
    assert parse_number(3) == 3.0
    assert parse_number(2.5) == 2.5
    assert parse_number(Decimal("1.25")) == 1.25


def test_parse_number_rejects_non_numbers():
    assert parse_number(True) is None
    assert parse_number("   ") is None
    assert parse_number([40]) is None
    assert parse_number(float("inf")) is None


def test_format_amount():
    assert format_amount(3000) == "$3000.00"
    assert format_amount(0.0) == "$0.00"
    assert format_amount(2840.5) == "$2840.50"
