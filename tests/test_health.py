"""Financial health scoring tests."""

from __future__ import annotations

import math
import random

import pytest

from finsight.constants.kinds import (
    BAND_GOOD,
    BAND_MODERATE,
    BAND_NEEDS_ATTENTION,
    FAIR,
    GOOD_STANDING,
    NEEDS_IMPROVEMENT,
    NO_DATA,
)
from finsight.models import Account, Goal
from finsight.services import health


def _account(balance, type="bank", is_active=True):
    return Account(user_id=1, name=type, type=type, balance=balance, is_active=is_active)


def _goal(name, target, current):
    return Goal(user_id=1, name=name, target_amount=target, current_amount=current)


def _js_round(value):
    return math.floor(value + 0.5)


class TestNoData:
    def test_no_accounts_reports_no_data_instead_of_zero(self):
        score = health.compute_health_score([])

        assert score.has_data is False
        assert score.total is None
        assert score.band == NO_DATA
        assert score.subscores == []
        assert score.percentage is None
        assert "Add accounts" in score.message

    def test_only_inactive_accounts_is_no_data(self):
        assert health.compute_health_score([_account(100, is_active=False)]).has_data is False


def test_dashboard_example_scores():
    accounts = [
        _account(245780.50, "bank"),
        _account(1850000, "savings"),
        _account(-45000, "credit_card"),
    ]

    score = health.compute_health_score(accounts, [_goal("Emergency Fund", 500000, 325000)])

    by_label = {sub.label: sub for sub in score.subscores}
    # savings ratio ~88% caps at 30
    assert by_label["Savings Rate"].score == 30
    # debt ratio ~2.15% -> 25 - 0.54 -> 24
    assert by_label["Debt Ratio"].score == 24
    # emergency 65% -> 16.25 -> 16
    assert by_label["Emergency Fund"].score == 16
    assert by_label["Emergency Fund"].band == BAND_MODERATE
    assert by_label["Emergency Fund"].fill_pct == pytest.approx(64)
    assert by_label["Investment Diversification"].score == 0
    assert by_label["Investment Diversification"].band == BAND_NEEDS_ATTENTION
    assert score.total == 70
    assert score.band == GOOD_STANDING
    assert score.max_score == 100


def test_emergency_fallback_depends_on_savings():
    assert health.emergency_progress([], savings_balance=10) == 50
    assert health.emergency_progress([], savings_balance=0) == 0
    assert health.emergency_progress([_goal("Rainy day EMERGENCY", 1000, 900)], 0) == pytest.approx(90)


def test_debt_only_user_gets_full_debt_score_when_assets_are_zero():
    score = health.compute_health_score([_account(-1000, "loan")])

    by_label = {sub.label: sub.score for sub in score.subscores}
    # no assets: every ratio is guarded to zero
    assert by_label["Debt Ratio"] == 25
    assert by_label["Savings Rate"] == 0
    assert score.total == 25
    assert score.band == NEEDS_IMPROVEMENT


@pytest.mark.parametrize(
    "total,band",
    [(100, GOOD_STANDING), (70, GOOD_STANDING), (69, FAIR), (50, FAIR), (49, NEEDS_IMPROVEMENT), (0, NEEDS_IMPROVEMENT)],
)
def test_overall_bands(total, band):
    assert health.overall_band(total) == band


@pytest.mark.parametrize(
    "score,expected",
    [(30, BAND_GOOD), (20, BAND_GOOD), (19, BAND_MODERATE), (10, BAND_MODERATE), (9, BAND_NEEDS_ATTENTION)],
)
def test_savings_bands(score, expected):
    sub = health.savings_score(score, 100)
    assert sub.score == score
    assert sub.band == expected


def test_investment_bands():
    assert health.investment_score(21, 100).band == BAND_GOOD  # 14
    assert health.investment_score(12, 100).band == BAND_MODERATE  # 8
    assert health.investment_score(10, 100).band == BAND_NEEDS_ATTENTION  # 7


def _random_accounts(rng):
    types = ["bank", "savings", "investment", "credit_card", "loan", "mobile_wallet"]
    accounts = []
    for _ in range(rng.randint(1, 8)):
        kind = rng.choice(types)
        magnitude = rng.uniform(0, 2_000_000)
        balance = -magnitude if kind in ("credit_card", "loan") or rng.random() < 0.1 else magnitude
        accounts.append(_account(round(balance, 2), kind))
    return accounts


@pytest.mark.parametrize("seed", range(50))
def test_scores_stay_within_bounds(seed):
    rng = random.Random(seed)
    goals = [_goal("Emergency", rng.uniform(1, 1e6), rng.uniform(0, 2e6))] if rng.random() < 0.5 else []

    score = health.compute_health_score(_random_accounts(rng), goals)

    for sub in score.subscores:
        assert 0 <= sub.score <= sub.max_score
    assert 0 <= score.total <= 100
    assert score.total == sum(sub.score for sub in score.subscores)


@pytest.mark.parametrize("seed", range(50))
def test_reduced_formulas_match_two_step_arithmetic(seed):
    rng = random.Random(seed)
    total_assets = rng.uniform(1, 1e7)
    savings = rng.uniform(0, total_assets)
    liabilities = rng.uniform(0, 2 * total_assets)
    investments = rng.uniform(0, total_assets)
    progress = rng.uniform(0, 150)

    savings_ratio = savings / total_assets * 100
    debt_ratio = liabilities / total_assets * 100
    investment_ratio = investments / total_assets * 100

    assert health.savings_score(savings, total_assets).score == min(30, _js_round(savings_ratio / 30 * 30))
    assert health.debt_score(liabilities, total_assets).score == max(0, _js_round(25 - debt_ratio / 4))
    assert health.emergency_score(progress).score == min(25, _js_round(progress / 100 * 25))
    assert health.investment_score(investments, total_assets).score == min(
        20, _js_round(investment_ratio / 30 * 20)
    )
