"""Composite financial-health scoring.

Four sub-scores are computed independently, each clamped to its own ceiling,
and summed into a score out of 100:

==========================  =======  ====================
Sub-score                   Ceiling  Bands (good/moderate)
==========================  =======  ====================
Savings Rate                30       20 / 10
Debt Ratio                  25       18 / 10
Emergency Fund              25       18 / 10
Investment Diversification  20       14 / 8
==========================  =======  ====================

Ratios are taken against total assets. The formulas below are the reduced
forms of the two-step dashboard arithmetic, e.g. the savings score
``min(30, round(ratio / 30 * 30))`` is just ``round(ratio)`` capped at 30.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..constants.kinds import (
    BAND_GOOD,
    BAND_MODERATE,
    BAND_NEEDS_ATTENTION,
    FAIR,
    GOOD_STANDING,
    INVESTMENT,
    NEEDS_IMPROVEMENT,
    NO_DATA,
    SAVINGS,
)
from ..logging_config import get_logger
from ..models.account import Account
from ..models.goal import Goal
from .aggregation import active_accounts, balance_by_type, compute_net_worth
from .goals import completion_pct, find_goal
from .numeric import clamp, percentage, round_half_up

logger = get_logger("services.health")

MAX_SCORE = 100
EMERGENCY_KEYWORD = "emergency"
# Emergency progress assumed when no emergency goal exists but savings do
DEFAULT_EMERGENCY_PROGRESS = 50.0

MESSAGES = {
    GOOD_STANDING: "Your financial health is above average. Keep up the good work!",
    FAIR: "Focus on improving your savings rate and reducing debt for a better score.",
    NEEDS_IMPROVEMENT: "Consider building your emergency fund and reviewing your spending habits.",
    NO_DATA: "Add accounts to see your financial health score.",
}


@dataclass(slots=True)
class SubScore:
    label: str
    score: int
    max_score: int
    band: str

    @property
    def fill_pct(self) -> float:
        return percentage(self.score, self.max_score)


@dataclass(slots=True)
class HealthScore:
    """Composite score; ``total`` is ``None`` when there was nothing to score."""

    total: Optional[int]
    band: str
    subscores: list[SubScore] = field(default_factory=list)
    max_score: int = MAX_SCORE

    @property
    def has_data(self) -> bool:
        return self.total is not None

    @property
    def percentage(self) -> Optional[float]:
        if self.total is None:
            return None
        return percentage(self.total, self.max_score)

    @property
    def message(self) -> str:
        return MESSAGES[self.band]

    @classmethod
    def no_data(cls) -> "HealthScore":
        return cls(total=None, band=NO_DATA, subscores=[])


def _band(score: int, *, good: int, moderate: int) -> str:
    if score >= good:
        return BAND_GOOD
    if score >= moderate:
        return BAND_MODERATE
    return BAND_NEEDS_ATTENTION


def savings_score(savings_balance: float, total_assets: float) -> SubScore:
    ratio = percentage(savings_balance, total_assets)
    score = int(clamp(round_half_up(ratio), 0, 30))
    return SubScore("Savings Rate", score, 30, _band(score, good=20, moderate=10))


def debt_score(total_liabilities: float, total_assets: float) -> SubScore:
    ratio = percentage(total_liabilities, total_assets)
    score = int(clamp(round_half_up(25 - ratio / 4), 0, 25))
    return SubScore("Debt Ratio", score, 25, _band(score, good=18, moderate=10))


def emergency_progress(goals: Iterable[Goal], savings_balance: float) -> float:
    """Completion of the emergency goal, or a stand-in based on savings."""

    goal = find_goal(goals, EMERGENCY_KEYWORD)
    if goal is not None:
        return completion_pct(goal)
    return DEFAULT_EMERGENCY_PROGRESS if savings_balance > 0 else 0.0


def emergency_score(progress: float) -> SubScore:
    score = int(clamp(round_half_up(progress * 0.25), 0, 25))
    return SubScore("Emergency Fund", score, 25, _band(score, good=18, moderate=10))


def investment_score(investment_balance: float, total_assets: float) -> SubScore:
    ratio = percentage(investment_balance, total_assets)
    score = int(clamp(round_half_up(ratio * 20 / 30), 0, 20))
    return SubScore("Investment Diversification", score, 20, _band(score, good=14, moderate=8))


def overall_band(total: int) -> str:
    pct = percentage(total, MAX_SCORE)
    if pct >= 70:
        return GOOD_STANDING
    if pct >= 50:
        return FAIR
    return NEEDS_IMPROVEMENT


def compute_health_score(
    accounts: Iterable[Account], goals: Iterable[Goal] | None = None
) -> HealthScore:
    """Score the user's finances, or report no data when there are no accounts."""

    accounts = active_accounts(accounts)
    if not accounts:
        return HealthScore.no_data()

    summary = compute_net_worth(accounts)
    savings_balance = balance_by_type(accounts, SAVINGS)
    investment_balance = balance_by_type(accounts, INVESTMENT)

    subscores = [
        savings_score(savings_balance, summary.total_assets),
        debt_score(summary.total_liabilities, summary.total_assets),
        emergency_score(emergency_progress(goals or [], savings_balance)),
        investment_score(investment_balance, summary.total_assets),
    ]
    total = sum(sub.score for sub in subscores)
    band = overall_band(total)

    logger.debug(
        "Computed health score",
        extra={"total": total, "band": band, "scores": [sub.score for sub in subscores]},
    )
    return HealthScore(total=total, band=band, subscores=subscores)
