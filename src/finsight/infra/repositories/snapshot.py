"""SQLModel implementation of the snapshot repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.snapshot import FinancialSnapshot
from ...logging_config import get_logger
from ...models import Account, Budget, Goal, Holding, Portfolio, Transaction

logger = get_logger("infra.snapshot")


class SQLModelSnapshotRepository:
    """Loads one user's records inside a single session."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def load(self, user_id: int) -> FinancialSnapshot:
        """Return every record owned by *user_id*.

        All statements run on the same session so the lists describe one
        consistent state of the store.
        """
        with self.session_factory() as session:
            accounts = session.exec(
                select(Account).where(Account.user_id == user_id).order_by(Account.id)  # type: ignore
            ).all()
            transactions = session.exec(
                select(Transaction)
                .where(Transaction.user_id == user_id)
                .order_by(Transaction.occurred_on, Transaction.id)  # type: ignore
            ).all()
            budgets = session.exec(
                select(Budget).where(Budget.user_id == user_id).order_by(Budget.id)  # type: ignore
            ).all()
            goals = session.exec(
                select(Goal).where(Goal.user_id == user_id).order_by(Goal.id)  # type: ignore
            ).all()
            portfolios = session.exec(
                select(Portfolio).where(Portfolio.user_id == user_id).order_by(Portfolio.id)  # type: ignore
            ).all()
            holdings = session.exec(
                select(Holding).where(Holding.user_id == user_id).order_by(Holding.id)  # type: ignore
            ).all()

            snapshot = FinancialSnapshot(
                user_id=user_id,
                accounts=list(accounts),
                transactions=list(transactions),
                budgets=list(budgets),
                goals=list(goals),
                portfolios=list(portfolios),
                holdings=list(holdings),
            )

        logger.debug(
            "Loaded snapshot",
            extra={
                "user_id": user_id,
                "accounts": len(snapshot.accounts),
                "transactions": len(snapshot.transactions),
                "portfolios": len(snapshot.portfolios),
                "holdings": len(snapshot.holdings),
            },
        )
        return snapshot
