"""Savings goal records."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Goal(SQLModel, table=True):
    """A savings target, optionally with a deadline."""

    __tablename__: ClassVar[str] = "goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    target_amount: float = Field(nullable=False, gt=0)
    current_amount: float = Field(default=0.0, nullable=False, ge=0)
    deadline: Optional[date] = Field(default=None)
    is_completed: Optional[bool] = Field(default=False)
    priority: Optional[int] = Field(default=None)
