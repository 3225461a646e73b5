"""Read-only bundle of one user's records handed to the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..models import Account, Budget, Goal, Holding, Portfolio, Transaction


@dataclass(slots=True)
class FinancialSnapshot:
    """Everything the dashboard derives its numbers from.

    Callers should fetch all lists in one read so the figures agree with each
    other; the engine does not detect read skew between them.
    """

    user_id: Optional[int] = None
    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    portfolios: list[Portfolio] = field(default_factory=list)
    holdings: list[Holding] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.accounts
            or self.transactions
            or self.budgets
            or self.goals
            or self.portfolios
            or self.holdings
        )
