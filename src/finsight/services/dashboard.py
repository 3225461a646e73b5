"""Data loaders for the overview dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

from ..config import BaseConfig
from ..domain.snapshot import FinancialSnapshot
from ..domain.warnings import UNRESOLVED_REFERENCE, EngineWarning, log_warnings
from ..logging_config import get_logger
from ..models import Account, Transaction
from .aggregation import (
    CashFlowTotals,
    CategorySpend,
    NetWorthSummary,
    active_accounts,
    compute_net_worth,
    is_active,
    sign_warnings,
    spend_by_category,
)
from .budgeting import BudgetStatus, BudgetSummary, evaluate_budgets, summarize_budgets
from .cashflow import CashFlowBucket, bucket_by_week, summarize_buckets
from .classification import PrivateEquityValue, compute_private_equity
from .goals import GoalStatus, GoalSummary, evaluate_goals, summarize_goals
from .health import HealthScore, compute_health_score

logger = get_logger("services.dashboard")


@dataclass(slots=True)
class DashboardSummary:
    net_worth: NetWorthSummary
    spending: list[CategorySpend]
    cash_flow: list[CashFlowBucket]
    cash_flow_totals: CashFlowTotals
    budgets: list[BudgetStatus]
    budget_summary: BudgetSummary
    goals: list[GoalStatus]
    goal_summary: GoalSummary
    health: HealthScore
    private_equity: dict[str, PrivateEquityValue]
    warnings: list[EngineWarning] = field(default_factory=list)


def _usable_transactions(
    transactions: Iterable[Transaction], accounts: Iterable[Account]
) -> tuple[list[Transaction], list[EngineWarning]]:
    """Drop transactions on inactive accounts; flag ones on unknown accounts.

    Transactions whose account is missing from the snapshot still count, since
    the engine reports on whatever data it was given.
    """

    activity = {account.id: is_active(account) for account in accounts}
    usable: list[Transaction] = []
    warnings: list[EngineWarning] = []
    for txn in transactions:
        if txn.account_id in activity:
            if activity[txn.account_id]:
                usable.append(txn)
            continue
        warnings.append(
            EngineWarning(
                kind=UNRESOLVED_REFERENCE,
                entity="transaction",
                entity_id=txn.id,
                message=f"Transaction {txn.id} references unknown account {txn.account_id}",
            )
        )
        usable.append(txn)
    return usable, warnings


def build_dashboard(
    snapshot: FinancialSnapshot,
    *,
    today: date | datetime | None = None,
    config: BaseConfig | None = None,
) -> DashboardSummary:
    """Derive every dashboard figure from one user's snapshot."""

    cfg = config or BaseConfig()
    today = today or date.today()

    accounts = active_accounts(snapshot.accounts)
    transactions, warnings = _usable_transactions(snapshot.transactions, snapshot.accounts)
    warnings.extend(sign_warnings(transactions))

    cash_flow = bucket_by_week(transactions, limit=cfg.CASH_FLOW_WEEKS)
    private_equity = compute_private_equity(snapshot.portfolios, snapshot.holdings)
    warnings.extend(private_equity.warnings)

    summary = DashboardSummary(
        net_worth=compute_net_worth(accounts),
        spending=spend_by_category(transactions, limit=cfg.TOP_CATEGORIES),
        cash_flow=cash_flow,
        cash_flow_totals=summarize_buckets(cash_flow),
        budgets=evaluate_budgets(snapshot.budgets, threshold=cfg.OVER_BUDGET_THRESHOLD),
        budget_summary=summarize_budgets(snapshot.budgets),
        goals=evaluate_goals(snapshot.goals, today=today),
        goal_summary=summarize_goals(snapshot.goals),
        health=compute_health_score(accounts, snapshot.goals),
        private_equity=private_equity.values,
        warnings=warnings,
    )

    log_warnings(logger, warnings)
    logger.info(
        "Dashboard built",
        extra={
            "user_id": snapshot.user_id,
            "accounts": len(accounts),
            "transactions": len(transactions),
            "warnings": len(warnings),
        },
    )
    return summary
