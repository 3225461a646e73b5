"""Threshold-crossing signals for the notification collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from ..constants.kinds import SEVERITY_ERROR, SEVERITY_SUCCESS, SEVERITY_WARNING
from ..logging_config import get_logger
from .budgeting import BudgetStatus
from .goals import GoalStatus
from .numeric import round_half_up

logger = get_logger("services.alerts")

BUDGET_OVER_THRESHOLD = "budget_over_threshold"
GOAL_REACHED = "goal_reached"
GOAL_DEADLINE_PASSED = "goal_deadline_passed"


@dataclass(slots=True, frozen=True)
class AlertSignal:
    kind: str
    severity: str
    title: str
    message: str
    subject_id: Optional[int] = None


class NotificationSink(Protocol):
    """Receives alert signals; delivery and storage are up to the implementation."""

    def emit(self, signal: AlertSignal) -> None:  # pragma: no cover - interface
        ...


def budget_alerts(
    current: Iterable[BudgetStatus], previous: Iterable[BudgetStatus] | None = None
) -> list[AlertSignal]:
    """Signal budgets that crossed into over-budget since *previous*.

    Without a previous evaluation every over-budget status signals.
    """

    was_over = {status.budget_id for status in previous or [] if status.is_over_budget}
    signals: list[AlertSignal] = []
    for status in current:
        if not status.is_over_budget or status.budget_id in was_over:
            continue
        signals.append(
            AlertSignal(
                kind=BUDGET_OVER_THRESHOLD,
                severity=SEVERITY_WARNING,
                title=f"{status.category or 'Budget'} budget alert",
                message=(
                    f"You've used {round_half_up(status.utilization_pct)}% of your "
                    f"{status.category or 'budget'} budget."
                ),
                subject_id=status.budget_id,
            )
        )
    return signals


def goal_alerts(
    current: Iterable[GoalStatus], previous: Iterable[GoalStatus] | None = None
) -> list[AlertSignal]:
    """Signal goals that reached their target or missed their deadline."""

    before = {status.goal_id: status for status in previous or []}
    signals: list[AlertSignal] = []
    for status in current:
        prior = before.get(status.goal_id)
        reached = status.completion_pct >= 100
        if reached and (prior is None or prior.completion_pct < 100):
            signals.append(
                AlertSignal(
                    kind=GOAL_REACHED,
                    severity=SEVERITY_SUCCESS,
                    title="Goal reached",
                    message=f"You reached your {status.name} goal.",
                    subject_id=status.goal_id,
                )
            )
        elif (
            not reached
            and not status.is_completed
            and status.deadline_passed
            and (prior is None or not prior.deadline_passed)
        ):
            signals.append(
                AlertSignal(
                    kind=GOAL_DEADLINE_PASSED,
                    severity=SEVERITY_ERROR,
                    title="Goal deadline passed",
                    message=(
                        f"The deadline for {status.name} has passed at "
                        f"{round_half_up(status.completion_pct)}% complete."
                    ),
                    subject_id=status.goal_id,
                )
            )
    return signals


def publish(signals: Iterable[AlertSignal], sink: NotificationSink) -> int:
    """Hand every signal to *sink* and return how many were sent."""

    sent = 0
    for signal in signals:
        sink.emit(signal)
        sent += 1
        logger.info(
            signal.title,
            extra={"kind": signal.kind, "severity": signal.severity, "subject_id": signal.subject_id},
        )
    return sent
