"""Portfolio models."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Portfolio(SQLModel, table=True):
    """One uploaded brokerage statement for an external account number.

    The same ``account_number`` is uploaded repeatedly over time, so several
    rows describe one account; which of them is current is decided by
    :mod:`finsight.services.snapshots`, never by insertion order.
    """

    __tablename__: ClassVar[str] = "portfolio"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    account_number: str = Field(nullable=False, max_length=64, index=True)
    account_name: Optional[str] = Field(default=None, max_length=128)
    broker_name: Optional[str] = Field(default=None, max_length=128)
    as_of_date: Optional[date] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
    total_market_value: float = Field(default=0.0, nullable=False)
    private_equity_value: float = Field(default=0.0, nullable=False)
    currency: str = Field(default="BDT", max_length=3)

    holdings: list["Holding"] = Relationship(
        back_populates="portfolio",
        sa_relationship=relationship("Holding", back_populates="portfolio"),
    )


class Holding(SQLModel, table=True):
    """A single position line inside a portfolio snapshot."""

    __tablename__: ClassVar[str] = "holding"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    portfolio_id: Optional[int] = Field(default=None, foreign_key="portfolio.id", index=True)
    symbol: str = Field(index=True, nullable=False, max_length=32)
    quantity: float = Field(default=0.0, nullable=False)
    market_value: float = Field(default=0.0, nullable=False)
    classification: Optional[str] = Field(default=None, max_length=32)

    portfolio: "Portfolio | None" = Relationship(
        back_populates="holdings",
        sa_relationship=relationship("Portfolio", back_populates="holdings"),
    )
