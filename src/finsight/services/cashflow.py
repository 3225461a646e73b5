"""Weekly cash-flow bucketing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from ..constants.kinds import EXPENSE, INCOME
from ..models.transaction import Transaction
from .aggregation import CashFlowTotals
from .numeric import round_currency, to_amount

DEFAULT_WEEKS = 7


@dataclass(slots=True)
class CashFlowBucket:
    """Income and expenses for the week starting on ``period_start`` (a Sunday)."""

    period_start: date
    income: float = 0.0
    expenses: float = 0.0

    @property
    def net(self) -> float:
        return round_currency(self.income - self.expenses)

    @property
    def label(self) -> str:
        """Short chart label such as ``"Jan 5"``; presentation only."""
        return f"{self.period_start:%b} {self.period_start.day}"


def week_start(day: date | datetime) -> date:
    """Return the Sunday on or before *day*."""

    if isinstance(day, datetime):
        day = day.date()
    # weekday(): Monday=0 .. Sunday=6; shift so Sunday is offset 0
    offset = (day.weekday() + 1) % 7
    return day - timedelta(days=offset)


def bucket_by_week(
    transactions: Iterable[Transaction], *, limit: int | None = DEFAULT_WEEKS
) -> list[CashFlowBucket]:
    """Group income/expense transactions into Sunday-based weeks.

    Income is summed as recorded and expenses by absolute value.

    Buckets are keyed by their start date, so two weeks whose labels look the
    same (e.g. "Jan 5" in different years) never merge. Results are ordered
    oldest first and only the most recent ``limit`` weeks are kept.
    """

    buckets: dict[date, CashFlowBucket] = {}
    for txn in transactions:
        if txn.type not in (INCOME, EXPENSE) or txn.occurred_on is None:
            continue
        start = week_start(txn.occurred_on)
        bucket = buckets.get(start)
        if bucket is None:
            bucket = buckets[start] = CashFlowBucket(period_start=start)
        amount = to_amount(txn.amount)
        if txn.type == INCOME:
            bucket.income += amount
        else:
            bucket.expenses += abs(amount)

    ordered = [buckets[key] for key in sorted(buckets)]
    for bucket in ordered:
        bucket.income = round_currency(bucket.income)
        bucket.expenses = round_currency(bucket.expenses)

    if limit is not None:
        ordered = ordered[-limit:] if limit > 0 else []
    return ordered


def summarize_buckets(buckets: Iterable[CashFlowBucket]) -> CashFlowTotals:
    """Total the income and expenses shown across *buckets*."""

    income = 0.0
    expenses = 0.0
    for bucket in buckets:
        income += bucket.income
        expenses += bucket.expenses
    return CashFlowTotals(income=round_currency(income), expenses=round_currency(expenses))
