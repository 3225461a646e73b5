"""Budgeting domain services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..models.budget import Budget
from .numeric import percentage, round_currency, to_amount

OVER_BUDGET_THRESHOLD = 90.0


@dataclass(slots=True)
class BudgetStatus:
    """Utilization of a single budget."""

    budget_id: int | None
    category: str
    allocated: float
    spent: float
    utilization_pct: float
    is_over_budget: bool

    @property
    def remaining(self) -> float:
        return round_currency(self.allocated - self.spent)

    @property
    def display_pct(self) -> float:
        """Utilization capped at 100 for progress bars."""
        return min(self.utilization_pct, 100.0)


@dataclass(slots=True)
class BudgetSummary:
    total_allocated: float
    total_spent: float
    utilization_pct: float

    @property
    def remaining(self) -> float:
        return round_currency(self.total_allocated - self.total_spent)


def utilization(*, spent: float, allocated: float) -> float:
    """Spent as a percentage of allocated; zero when nothing is allocated."""

    return percentage(spent, allocated)


def evaluate_budget(budget: Budget, *, threshold: float = OVER_BUDGET_THRESHOLD) -> BudgetStatus:
    allocated = to_amount(budget.allocated)
    spent = to_amount(budget.spent)
    pct = utilization(spent=spent, allocated=allocated)
    return BudgetStatus(
        budget_id=budget.id,
        category=budget.category or "",
        allocated=allocated,
        spent=spent,
        utilization_pct=pct,
        is_over_budget=pct >= threshold,
    )


def evaluate_budgets(
    budgets: Iterable[Budget], *, threshold: float = OVER_BUDGET_THRESHOLD
) -> list[BudgetStatus]:
    """Evaluate every budget, preserving input order."""

    return [evaluate_budget(budget, threshold=threshold) for budget in budgets]


def summarize_budgets(budgets: Iterable[Budget]) -> BudgetSummary:
    """Overall utilization using the same zero-allocation rule as a single budget."""

    total_allocated = 0.0
    total_spent = 0.0
    for budget in budgets:
        total_allocated += to_amount(budget.allocated)
        total_spent += to_amount(budget.spent)
    return BudgetSummary(
        total_allocated=round_currency(total_allocated),
        total_spent=round_currency(total_spent),
        utilization_pct=utilization(spent=total_spent, allocated=total_allocated),
    )
