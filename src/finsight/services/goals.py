"""Goal progress tracking."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..models.goal import Goal
from .numeric import percentage, round_currency, to_amount

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(slots=True)
class GoalStatus:
    goal_id: int | None
    name: str
    completion_pct: float
    days_remaining: Optional[int]
    is_completed: bool = False

    @property
    def deadline_passed(self) -> bool:
        return self.days_remaining is not None and self.days_remaining <= 0


@dataclass(slots=True)
class GoalSummary:
    """Totals across goals that are still in progress."""

    active_count: int
    completed_count: int
    total_target: float
    total_saved: float

    @property
    def completion_pct(self) -> float:
        return percentage(self.total_saved, self.total_target)


def completion_pct(goal: Goal) -> float:
    """Saved amount as a percentage of the target; may exceed 100."""

    return percentage(goal.current_amount, goal.target_amount)


def days_remaining(goal: Goal, today: date | datetime) -> Optional[int]:
    """Whole days until the deadline, rounded up; ``None`` without a deadline.

    Zero or negative values mean the deadline has passed. When *today* carries
    a time of day, the partial day still counts as a remaining day.
    """

    deadline = goal.deadline
    if deadline is None:
        return None
    if isinstance(deadline, datetime):
        deadline = deadline.date()
    if isinstance(today, datetime):
        deadline_start = datetime.combine(deadline, time.min, tzinfo=today.tzinfo)
        return math.ceil((deadline_start - today).total_seconds() / SECONDS_PER_DAY)
    return (deadline - today).days


def is_completed(goal: Goal) -> bool:
    return bool(goal.is_completed)


def evaluate_goal(goal: Goal, *, today: date | datetime) -> GoalStatus:
    return GoalStatus(
        goal_id=goal.id,
        name=goal.name or "",
        completion_pct=completion_pct(goal),
        days_remaining=days_remaining(goal, today),
        is_completed=is_completed(goal),
    )


def evaluate_goals(
    goals: Iterable[Goal], *, today: date | datetime, include_completed: bool = True
) -> list[GoalStatus]:
    return [
        evaluate_goal(goal, today=today)
        for goal in goals
        if include_completed or not is_completed(goal)
    ]


def summarize_goals(goals: Iterable[Goal]) -> GoalSummary:
    active = 0
    completed = 0
    total_target = 0.0
    total_saved = 0.0
    for goal in goals:
        if is_completed(goal):
            completed += 1
            continue
        active += 1
        total_target += to_amount(goal.target_amount)
        total_saved += to_amount(goal.current_amount)
    return GoalSummary(
        active_count=active,
        completed_count=completed,
        total_target=round_currency(total_target),
        total_saved=round_currency(total_saved),
    )


def find_goal(goals: Iterable[Goal], keyword: str) -> Optional[Goal]:
    """First goal whose name contains *keyword*, ignoring case."""

    needle = keyword.lower()
    for goal in goals:
        if needle in (goal.name or "").lower():
            return goal
    return None
