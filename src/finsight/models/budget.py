"""Budgeting tables."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Budget(SQLModel, table=True):
    """A per-category spending envelope with its running spend."""

    __tablename__: ClassVar[str] = "budget"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    category: str = Field(nullable=False, max_length=64, index=True)
    allocated: float = Field(default=0.0, nullable=False, ge=0)
    spent: float = Field(default=0.0, nullable=False, ge=0)
    period: Optional[str] = Field(default="monthly", max_length=16)
    start_date: Optional[date] = Field(default=None)
    end_date: Optional[date] = Field(default=None)
