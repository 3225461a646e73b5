"""FinSight financial aggregation and scoring engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .domain.snapshot import FinancialSnapshot
from .services.dashboard import DashboardSummary, build_dashboard

__all__ = ["BaseConfig", "DashboardSummary", "DevConfig", "FinancialSnapshot", "build_dashboard"]
