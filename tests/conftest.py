"""Pytest configuration and shared fixtures for FinSight tests.

This module provides database fixtures, test data factories, and helper utilities
for testing the engine services and the snapshot loader without touching a real
record store.
"""

from __future__ import annotations

import tempfile
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from finsight.models import Account, Budget, Goal, Holding, Portfolio, Transaction

TEST_USER_ID = 1


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep config-created directories out of the working tree."""

    monkeypatch.setenv("FINSIGHT_DATA_DIR", str(tmp_path / "instance"))
    return tmp_path / "instance"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session used by the factories to seed records."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories expect."""

    from finsight.infra.database import create_session_factory

    return create_session_factory(db_engine)


# =============================================================================
# Test Data Factories
# =============================================================================


def _persist(session: Session, record):
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


@pytest.fixture
def account_factory(db_session):
    """Factory for creating persisted accounts."""

    def _create_account(
        name: str = "Test Account",
        type: str = "bank",
        balance: float = 0.0,
        is_active: bool = True,
        user_id: int = TEST_USER_ID,
    ) -> Account:
        return _persist(
            db_session,
            Account(
                user_id=user_id,
                name=name,
                institution="Test Bank",
                type=type,
                balance=balance,
                is_active=is_active,
            ),
        )

    return _create_account


@pytest.fixture
def transaction_factory(db_session):
    """Factory for creating persisted transactions.

    Amounts are positive for income and negative for expenses.
    """

    def _create_transaction(
        amount: float,
        type: str = "expense",
        category: str = "Groceries",
        occurred_on: date | None = None,
        account_id: int | None = None,
        user_id: int = TEST_USER_ID,
    ) -> Transaction:
        return _persist(
            db_session,
            Transaction(
                user_id=user_id,
                account_id=account_id,
                occurred_on=occurred_on or date(2024, 3, 6),
                amount=amount,
                type=type,
                category=category,
                description="Test transaction",
            ),
        )

    return _create_transaction


@pytest.fixture
def budget_factory(db_session):
    def _create_budget(
        category: str = "Groceries",
        allocated: float = 1000.0,
        spent: float = 0.0,
        user_id: int = TEST_USER_ID,
    ) -> Budget:
        return _persist(
            db_session,
            Budget(user_id=user_id, category=category, allocated=allocated, spent=spent),
        )

    return _create_budget


@pytest.fixture
def goal_factory(db_session):
    def _create_goal(
        name: str = "Emergency Fund",
        target_amount: float = 100000.0,
        current_amount: float = 0.0,
        deadline: date | None = None,
        user_id: int = TEST_USER_ID,
    ) -> Goal:
        return _persist(
            db_session,
            Goal(
                user_id=user_id,
                name=name,
                target_amount=target_amount,
                current_amount=current_amount,
                deadline=deadline,
            ),
        )

    return _create_goal


@pytest.fixture
def portfolio_factory(db_session):
    """Factory for creating persisted portfolio snapshots."""

    def _create_portfolio(
        account_number: str = "ACC1",
        as_of_date: date | None = None,
        created_at: datetime | None = None,
        private_equity_value: float = 0.0,
        user_id: int = TEST_USER_ID,
    ) -> Portfolio:
        return _persist(
            db_session,
            Portfolio(
                user_id=user_id,
                account_number=account_number,
                as_of_date=as_of_date,
                created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
                private_equity_value=private_equity_value,
            ),
        )

    return _create_portfolio


@pytest.fixture
def holding_factory(db_session):
    def _create_holding(
        portfolio_id: int,
        symbol: str = "TEST",
        market_value: float = 1000.0,
        classification: str | None = None,
        user_id: int = TEST_USER_ID,
    ) -> Holding:
        return _persist(
            db_session,
            Holding(
                user_id=user_id,
                portfolio_id=portfolio_id,
                symbol=symbol,
                market_value=market_value,
                classification=classification,
            ),
        )

    return _create_holding


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
