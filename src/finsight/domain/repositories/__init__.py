"""Repository protocol definitions for domain layer."""

from .snapshot import SnapshotRepository

__all__ = ["SnapshotRepository"]
