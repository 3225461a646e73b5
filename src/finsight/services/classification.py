"""Private-equity valuation from classified holdings.

Each portfolio snapshot stores a ``private_equity_value`` that is meant to
equal the sum of its classified holdings. This module recomputes that sum from
the holdings of the *current* snapshot per account so the two can be compared
and, where they drift, a sync instruction produced for the record store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..constants.kinds import UNCLASSIFIED
from ..domain.warnings import UNRESOLVED_REFERENCE, EngineWarning
from ..logging_config import get_logger
from ..models.portfolio import Holding, Portfolio
from .numeric import round_half_up, to_amount
from .snapshots import resolve_current

logger = get_logger("services.classification")


@dataclass(slots=True)
class PrivateEquityValue:
    resolved_snapshot_id: int | None
    calculated_value: int
    stored_value: float

    @property
    def drift(self) -> float:
        return self.calculated_value - self.stored_value

    @property
    def in_sync(self) -> bool:
        return self.calculated_value == self.stored_value


@dataclass(slots=True)
class ClassificationResult:
    values: dict[str, PrivateEquityValue] = field(default_factory=dict)
    warnings: list[EngineWarning] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SyncInstruction:
    """Value the record store should write to a snapshot's stored field."""

    portfolio_id: int | None
    value: int


def is_classified(holding: Holding) -> bool:
    """True for holdings tagged with a real valuation bucket."""

    tag = (holding.classification or "").strip()
    return bool(tag) and tag.lower() != UNCLASSIFIED


def compute_private_equity(
    portfolios: Iterable[Portfolio], holdings: Iterable[Holding]
) -> ClassificationResult:
    """Sum rounded market values of classified holdings per account number.

    Only holdings attached to the resolved current snapshot count; holdings of
    superseded snapshots are ignored. Holdings pointing at a snapshot that is
    not in *portfolios* at all are reported as warnings.
    """

    portfolios = list(portfolios)
    resolution = resolve_current(portfolios)
    result = ClassificationResult(warnings=list(resolution.warnings))

    known_ids = {portfolio.id for portfolio in portfolios}
    account_by_snapshot: dict[int | None, str] = {}
    for account_number, snapshot in resolution.current.items():
        account_by_snapshot[snapshot.id] = account_number
        result.values[account_number] = PrivateEquityValue(
            resolved_snapshot_id=snapshot.id,
            calculated_value=0,
            stored_value=to_amount(snapshot.private_equity_value),
        )

    for holding in holdings:
        if holding.portfolio_id not in known_ids:
            result.warnings.append(
                EngineWarning(
                    kind=UNRESOLVED_REFERENCE,
                    entity="holding",
                    entity_id=holding.id,
                    message=(
                        f"Holding {holding.id} references unknown portfolio {holding.portfolio_id}"
                    ),
                )
            )
            continue
        account_number = account_by_snapshot.get(holding.portfolio_id)
        if account_number is None or not is_classified(holding):
            continue
        result.values[account_number].calculated_value += round_half_up(holding.market_value)

    logger.debug(
        "Computed private equity",
        extra={"accounts": len(result.values), "warnings": len(result.warnings)},
    )
    return result


def pending_sync(result: ClassificationResult) -> list[SyncInstruction]:
    """Instructions for every account whose stored value has drifted."""

    return [
        SyncInstruction(portfolio_id=value.resolved_snapshot_id, value=value.calculated_value)
        for _, value in sorted(result.values.items())
        if not value.in_sync
    ]
