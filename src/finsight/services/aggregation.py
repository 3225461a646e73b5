"""Balance and spending aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..constants.kinds import EXPENSE, INCOME, UNCATEGORIZED
from ..domain.warnings import SIGN_MISMATCH, EngineWarning
from ..models.account import Account
from ..models.transaction import Transaction
from .numeric import percentage, round_currency, to_amount


@dataclass(slots=True)
class NetWorthSummary:
    total_assets: float
    total_liabilities: float
    net_worth: float


@dataclass(slots=True)
class CategorySpend:
    """Expense total for one category."""

    category: str
    amount: float
    share_pct: float


@dataclass(slots=True)
class CashFlowTotals:
    income: float
    expenses: float

    @property
    def net(self) -> float:
        return round_currency(self.income - self.expenses)


def is_active(account: Account) -> bool:
    """Accounts count unless explicitly deactivated."""

    return getattr(account, "is_active", True) is not False


def active_accounts(accounts: Iterable[Account]) -> list[Account]:
    return [account for account in accounts if is_active(account)]


def compute_net_worth(accounts: Iterable[Account]) -> NetWorthSummary:
    """Split active balances into assets and liabilities.

    Positive balances are assets, negative balances are liabilities reported
    as a positive magnitude. Empty input yields zeros.
    """

    assets = 0.0
    liabilities = 0.0
    for account in active_accounts(accounts):
        balance = to_amount(account.balance)
        if balance > 0:
            assets += balance
        elif balance < 0:
            liabilities += balance

    total_assets = round_currency(assets)
    total_liabilities = round_currency(abs(liabilities))
    return NetWorthSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=round_currency(total_assets - total_liabilities),
    )


def balance_by_type(accounts: Iterable[Account], account_type: str) -> float:
    """Sum signed balances of active accounts of one type."""

    return round_currency(
        sum(
            to_amount(account.balance)
            for account in active_accounts(accounts)
            if account.type == account_type
        )
    )


def spend_by_category(
    transactions: Iterable[Transaction], *, limit: int | None = None
) -> list[CategorySpend]:
    """Group expense amounts by category, largest first.

    Only ``expense`` transactions count and their absolute amounts are summed.
    ``share_pct`` is relative to all expenses, even when ``limit`` truncates
    the list.
    """

    totals: dict[str, float] = {}
    for txn in transactions:
        if txn.type != EXPENSE:
            continue
        category = (txn.category or "").strip() or UNCATEGORIZED
        totals[category] = totals.get(category, 0.0) + abs(to_amount(txn.amount))

    grand_total = sum(totals.values())
    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ranked = ranked[: max(limit, 0)]

    return [
        CategorySpend(
            category=category,
            amount=round_currency(amount),
            share_pct=percentage(amount, grand_total),
        )
        for category, amount in ranked
    ]


def income_expense_totals(transactions: Iterable[Transaction]) -> CashFlowTotals:
    """Total income and expenses; transfers are ignored.

    Income keeps its recorded sign, so a negative income row reduces the total.
    Expenses are summed by absolute value.
    """

    income = 0.0
    expenses = 0.0
    for txn in transactions:
        if txn.type == INCOME:
            income += to_amount(txn.amount)
        elif txn.type == EXPENSE:
            expenses += abs(to_amount(txn.amount))
    return CashFlowTotals(income=round_currency(income), expenses=round_currency(expenses))


def sign_warnings(transactions: Iterable[Transaction]) -> list[EngineWarning]:
    """Flag income recorded as negative or expenses recorded as positive."""

    warnings: list[EngineWarning] = []
    for txn in transactions:
        amount = to_amount(txn.amount)
        if (txn.type == INCOME and amount < 0) or (txn.type == EXPENSE and amount > 0):
            warnings.append(
                EngineWarning(
                    kind=SIGN_MISMATCH,
                    entity="transaction",
                    entity_id=txn.id,
                    message=f"Transaction {txn.id} is {txn.type} but has amount {amount}",
                )
            )
    return warnings
