"""Account records: the balances behind net worth and the health score."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .transaction import Transaction


class Account(SQLModel, table=True):
    """A bank, wallet, card, loan or investment account owned by one user."""

    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    institution: str = Field(default="", max_length=128)
    type: str = Field(default="bank", nullable=False, max_length=32, index=True)
    balance: float = Field(default=0.0, nullable=False, description="Negative balances are liabilities")
    currency: str = Field(default="BDT", max_length=3)
    is_active: Optional[bool] = Field(default=True)

    transactions: list["Transaction"] = Relationship(
        back_populates="account",
        sa_relationship=relationship("Transaction", back_populates="account"),
    )
