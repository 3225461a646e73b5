"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .account import Account


class Transaction(SQLModel, table=True):
    """A single income, expense or transfer line on an account."""

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    account_id: Optional[int] = Field(default=None, foreign_key="account.id", index=True)
    occurred_on: date = Field(nullable=False, index=True)
    amount: float = Field(nullable=False, description="Positive for income, negative for expense")
    type: str = Field(default="expense", nullable=False, max_length=16)
    category: str = Field(default="", max_length=64)
    description: str = Field(default="", max_length=255)

    account: "Account | None" = Relationship(
        back_populates="transactions",
        sa_relationship=relationship("Account", back_populates="transactions"),
    )
