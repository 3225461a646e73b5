"""Private-equity classification aggregation tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from finsight.domain.warnings import UNRESOLVED_REFERENCE
from finsight.models import Holding, Portfolio
from finsight.services.classification import (
    PrivateEquityValue,
    compute_private_equity,
    is_classified,
    pending_sync,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _portfolio(id, account_number="ACC1", as_of_date=None, created_at=T0, stored=0.0):
    return Portfolio(
        id=id,
        user_id=1,
        account_number=account_number,
        as_of_date=as_of_date,
        created_at=created_at,
        private_equity_value=stored,
    )


def _holding(portfolio_id, market_value, classification=None, id=None):
    return Holding(
        id=id,
        user_id=1,
        portfolio_id=portfolio_id,
        symbol="PE",
        market_value=market_value,
        classification=classification,
    )


@pytest.mark.parametrize(
    "classification,expected",
    [(None, False), ("", False), ("none", False), ("None", False), ("  ", False), ("private_equity", True)],
)
def test_is_classified(classification, expected):
    assert is_classified(_holding(1, 10, classification)) is expected


def test_only_holdings_of_current_snapshot_are_summed():
    portfolios = [
        _portfolio(1, as_of_date=date(2024, 1, 31), stored=5000),
        _portfolio(2, as_of_date=date(2024, 2, 29), stored=7000),
    ]
    holdings = [
        _holding(1, 99999.0, "private_equity"),
        _holding(2, 3000.4, "private_equity"),
        _holding(2, 3999.5, "pre_ipo"),
        _holding(2, 123456.0, "none"),
        _holding(2, 500.0, None),
    ]

    result = compute_private_equity(portfolios, holdings)

    value = result.values["ACC1"]
    assert value.resolved_snapshot_id == 2
    assert value.calculated_value == 3000 + 4000
    assert value.stored_value == 7000
    assert value.in_sync is True
    assert result.warnings == []


def test_account_without_classified_holdings_reports_zero():
    result = compute_private_equity([_portfolio(1, stored=250)], [_holding(1, 100, "none")])

    assert result.values["ACC1"].calculated_value == 0
    assert result.values["ACC1"].drift == -250


def test_holding_on_unknown_snapshot_is_a_warning():
    result = compute_private_equity([_portfolio(1)], [_holding(42, 100, "private_equity", id=7)])

    assert result.values["ACC1"].calculated_value == 0
    assert len(result.warnings) == 1
    assert result.warnings[0].kind == UNRESOLVED_REFERENCE
    assert result.warnings[0].entity_id == 7


def test_dated_snapshot_is_used_even_when_created_earlier():
    portfolios = [
        _portfolio(1, as_of_date=None, created_at=T0 + timedelta(days=2)),
        _portfolio(2, as_of_date=date(2024, 1, 1), created_at=T0),
    ]
    holdings = [_holding(1, 10, "private_equity"), _holding(2, 20, "private_equity")]

    result = compute_private_equity(portfolios, holdings)

    assert result.values["ACC1"].resolved_snapshot_id == 2
    assert result.values["ACC1"].calculated_value == 20


def test_inputs_are_not_mutated():
    portfolio = _portfolio(1, stored=1)
    compute_private_equity([portfolio], [_holding(1, 500, "private_equity")])
    assert portfolio.private_equity_value == 1


def test_pending_sync_lists_drifted_accounts():
    result = compute_private_equity(
        [_portfolio(1, "A", stored=100), _portfolio(2, "B", stored=0)],
        [_holding(1, 100, "private_equity"), _holding(2, 250.5, "private_equity")],
    )

    instructions = pending_sync(result)

    assert [(i.portfolio_id, i.value) for i in instructions] == [(2, 251)]


def test_private_equity_value_drift():
    value = PrivateEquityValue(resolved_snapshot_id=1, calculated_value=900, stored_value=1000.0)
    assert value.drift == -100
    assert value.in_sync is False
