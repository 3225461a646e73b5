"""Snapshot repository protocol."""

from __future__ import annotations

from typing import Protocol

from ..snapshot import FinancialSnapshot


class SnapshotRepository(Protocol):
    """Record-store collaborator that supplies a user's records in one read."""

    def load(self, user_id: int) -> FinancialSnapshot:
        """Return every record owned by *user_id*."""
        ...
