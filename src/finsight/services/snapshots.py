"""Resolution of the current portfolio snapshot per account number.

Brokerage statements for the same account are uploaded again and again, and
uploads arrive out of order: a statement dated last month may be uploaded
after this month's. The current snapshot for an account is therefore chosen
by comparing snapshots pairwise:

* a snapshot with an ``as_of_date`` outranks one without,
* between two dated snapshots the later ``as_of_date`` wins,
* when the ``as_of_date`` values are equal (or both absent) the later
  ``created_at`` wins,
* anything else keeps the snapshot already picked.

Once an account is resolved, adding an older statement never moves it back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from operator import attrgetter
from typing import Any, Callable, Generic, Hashable, Iterable, Optional, Protocol, TypeVar

from ..domain.warnings import MISSING_KEY, EngineWarning
from ..logging_config import get_logger

logger = get_logger("services.snapshots")


class Dated(Protocol):
    """Anything carrying the two timestamps the resolver compares."""

    id: Any
    as_of_date: Optional[date]
    created_at: Optional[datetime]


S = TypeVar("S", bound=Dated)


@dataclass(slots=True)
class SnapshotResolution(Generic[S]):
    current: dict[Hashable, S] = field(default_factory=dict)
    warnings: list[EngineWarning] = field(default_factory=list)

    @property
    def current_ids(self) -> set:
        return {snapshot.id for snapshot in self.current.values()}


def _as_of(snapshot: Dated) -> Optional[date]:
    value = getattr(snapshot, "as_of_date", None)
    if isinstance(value, datetime):
        return value.date()
    return value


def _created(snapshot: Dated) -> Optional[datetime]:
    value = getattr(snapshot, "created_at", None)
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if value.tzinfo is None:
        # naive timestamps are stored as UTC
        value = value.replace(tzinfo=timezone.utc)
    return value


def _created_later(current: Dated, challenger: Dated) -> bool:
    challenger_created = _created(challenger)
    if challenger_created is None:
        return False
    current_created = _created(current)
    return current_created is None or challenger_created > current_created


def supersedes(current: Dated, challenger: Dated) -> bool:
    """Return True when *challenger* should replace *current* as the pick."""

    current_as_of = _as_of(current)
    challenger_as_of = _as_of(challenger)

    if current_as_of is None and challenger_as_of is not None:
        return True
    if current_as_of is not None and challenger_as_of is not None:
        if challenger_as_of > current_as_of:
            return True
        if challenger_as_of == current_as_of:
            return _created_later(current, challenger)
        return False
    if current_as_of is None and challenger_as_of is None:
        return _created_later(current, challenger)
    return False


def _canonical_order(snapshot: Dated) -> tuple:
    # complete ties keep the first snapshot visited, so visit in id order
    snapshot_id = getattr(snapshot, "id", None)
    missing = snapshot_id is None
    if not isinstance(snapshot_id, (int, float)):
        snapshot_id = str(snapshot_id)
    return (missing, type(snapshot_id).__name__, snapshot_id)


def resolve_current(
    snapshots: Iterable[S],
    *,
    key: Callable[[S], Hashable] = attrgetter("account_number"),
) -> SnapshotResolution[S]:
    """Pick the current snapshot for every distinct key."""

    resolution: SnapshotResolution[S] = SnapshotResolution()
    for snapshot in sorted(snapshots, key=_canonical_order):
        group_key = key(snapshot)
        if group_key is None or (isinstance(group_key, str) and not group_key.strip()):
            resolution.warnings.append(
                EngineWarning(
                    kind=MISSING_KEY,
                    entity="portfolio",
                    entity_id=snapshot.id,
                    message=f"Snapshot {snapshot.id} has no account number and was skipped",
                )
            )
            continue
        running = resolution.current.get(group_key)
        if running is None or supersedes(running, snapshot):
            resolution.current[group_key] = snapshot

    logger.debug(
        "Resolved current snapshots",
        extra={"keys": len(resolution.current), "skipped": len(resolution.warnings)},
    )
    return resolution


def current_snapshots(snapshots: Iterable[S], **kwargs) -> dict[Hashable, S]:
    """Shortcut returning only the key → snapshot mapping."""

    return resolve_current(snapshots, **kwargs).current
