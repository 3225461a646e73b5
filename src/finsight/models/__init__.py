"""SQLModel table exports."""

from .account import Account
from .budget import Budget
from .goal import Goal
from .portfolio import Holding, Portfolio
from .transaction import Transaction

__all__ = [
    "Account",
    "Budget",
    "Goal",
    "Holding",
    "Portfolio",
    "Transaction",
]
