"""Domain types shared by the engine services."""

from .snapshot import FinancialSnapshot
from .warnings import EngineWarning

__all__ = ["EngineWarning", "FinancialSnapshot"]
