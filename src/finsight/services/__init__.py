"""Service module exports."""

from . import (
    aggregation,
    alerts,
    budgeting,
    cashflow,
    classification,
    dashboard,
    formatting,
    goals,
    health,
    numeric,
    snapshots,
)

__all__ = [
    "aggregation",
    "alerts",
    "budgeting",
    "cashflow",
    "classification",
    "dashboard",
    "formatting",
    "goals",
    "health",
    "numeric",
    "snapshots",
]
