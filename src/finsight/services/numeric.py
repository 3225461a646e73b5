"""Numeric helpers shared by every engine service."""

from __future__ import annotations

import math
from typing import Any


def to_amount(value: Any) -> float:
    """Read a stored numeric field; absent or non-finite values count as zero."""

    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def safe_div(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator``, or 0 when the denominator is not positive."""

    numerator = to_amount(numerator)
    denominator = to_amount(denominator)
    if denominator > 0:
        return numerator / denominator
    return 0.0


def percentage(numerator: float, denominator: float) -> float:
    return safe_div(numerator, denominator) * 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward positive infinity.

    Matches the dashboard's rounding (``round_half_up(2.5) == 3`` and
    ``round_half_up(-2.5) == -2``); Python's ``round`` would give 2 and -2.
    """

    return int(math.floor(to_amount(value) + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_currency(amount: float) -> float:
    """Round to cents for reporting totals."""

    return round(to_amount(amount), 2)


__all__ = ["clamp", "percentage", "round_currency", "round_half_up", "safe_div", "to_amount"]
