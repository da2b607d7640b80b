"""
Band entity models.

Bands are the unit that earns money and fame from performances. Earnings
are also written to an audit table so the finances tab can itemize them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Band(Base, table=True):
    """A band and its running totals.

    The stat columns are nullable in the hosted schema; readers coalesce them.

    Table: bands
    """

    __tablename__ = "bands"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    genre: Optional[str] = Field(default=None, max_length=100)
    leader_id: Optional[str] = Field(default=None, max_length=36, description="auth user id of the band leader")

    fame: Optional[int] = Field(default=0)
    band_balance: Optional[int] = Field(default=0, description="Shared band funds in whole dollars")
    weekly_fans: Optional[int] = Field(default=0)
    total_fans: Optional[int] = Field(default=0)
    collective_fame_earned: Optional[int] = Field(default=0)
    performance_count: Optional[int] = Field(default=0)
    jam_count: Optional[int] = Field(default=0)

    popularity: Optional[int] = Field(default=0)
    chemistry_level: Optional[int] = Field(default=0)
    cohesion_score: Optional[int] = Field(default=0)
    fame_multiplier: Optional[float] = Field(default=1.0)

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<Band(id={self.id}, name={self.name}, fame={self.fame})>"


class BandEarning(Base, table=True):
    """One credited amount on a band's ledger.

    Table: band_earnings
    """

    __tablename__ = "band_earnings"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    band_id: str = Field(foreign_key="bands.id", index=True, max_length=36)
    amount: int
    source: str = Field(max_length=50, description="major_event, gig, festival, ...")
    description: Optional[str] = Field(default=None)
    details: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<BandEarning(band_id={self.band_id}, amount={self.amount}, source={self.source})>"
