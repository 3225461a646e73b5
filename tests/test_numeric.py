"""Numeric helper tests."""

from __future__ import annotations

import math

import pytest

from finsight.services.numeric import (
    clamp,
    percentage,
    round_currency,
    round_half_up,
    safe_div,
    to_amount,
)


@pytest.mark.parametrize("value", [None, "abc", math.nan, math.inf, -math.inf])
def test_to_amount_treats_missing_and_non_finite_as_zero(value):
    assert to_amount(value) == 0.0


def test_to_amount_reads_numeric_strings():
    assert to_amount("12.5") == 12.5


@pytest.mark.parametrize("denominator", [0, 0.0, -10, None])
def test_safe_div_guards_non_positive_denominators(denominator):
    result = safe_div(50, denominator)
    assert result == 0.0
    assert math.isfinite(result)


def test_safe_div_divides_normally():
    assert safe_div(9200, 10000) == pytest.approx(0.92)


def test_percentage():
    assert percentage(325000, 500000) == pytest.approx(65.0)
    assert percentage(1, 0) == 0.0


@pytest.mark.parametrize(
    "value,expected",
    [(2.5, 3), (-2.5, -2), (2.4999, 2), (0.5, 1), (-0.5, 0), (83.0, 83), (-7.6, -8)],
)
def test_round_half_up_sends_halves_toward_positive_infinity(value, expected):
    assert round_half_up(value) == expected


def test_clamp_bounds():
    assert clamp(45, 0, 30) == 30
    assert clamp(-3, 0, 30) == 0
    assert clamp(12, 0, 30) == 12


def test_round_currency():
    assert round_currency(0.1 + 0.2) == 0.3
    assert round_currency(None) == 0.0
