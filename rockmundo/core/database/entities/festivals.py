"""
Festival entity models.

A participant row is a band's booked slot at a festival. Completing the set
writes a history row, one to three press reviews and a merch sales row.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class FestivalParticipant(Base, table=True):
    """Table: festival_participants"""

    __tablename__ = "festival_participants"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    event_id: str = Field(index=True, max_length=36)
    band_id: Optional[str] = Field(default=None, foreign_key="bands.id", max_length=36)
    user_id: str = Field(max_length=36)
    slot_type: Optional[str] = Field(default=None, max_length=50)
    payout_amount: Optional[int] = Field(default=None)
    status: str = Field(default="confirmed", max_length=20)


class FestivalPerformanceHistory(Base, table=True):
    """Table: festival_performance_history"""

    __tablename__ = "festival_performance_history"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    participation_id: str = Field(foreign_key="festival_participants.id", max_length=36)
    band_id: str = Field(foreign_key="bands.id", index=True, max_length=36)
    festival_id: str = Field(max_length=36)
    user_id: str = Field(max_length=36)
    performance_score: float
    crowd_energy_peak: float
    crowd_energy_avg: float
    songs_performed: int = Field(default=0)
    payment_earned: int
    fame_earned: int
    merch_revenue: int
    new_fans_gained: int
    critic_score: float
    fan_score: float
    review_headline: str
    review_summary: str
    highlight_moments: Optional[list] = Field(default=None, sa_column=Column(JSON))
    slot_type: Optional[str] = Field(default=None, max_length=50)
    performance_date: datetime = Field(default_factory=utc_now)


class FestivalReview(Base, table=True):
    """Table: festival_reviews"""

    __tablename__ = "festival_reviews"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    performance_id: str = Field(foreign_key="festival_performance_history.id", index=True, max_length=36)
    band_id: str = Field(max_length=36)
    reviewer_type: str = Field(max_length=20)
    publication_name: str = Field(max_length=100)
    score: int
    headline: str
    review_text: str
    sentiment: str = Field(max_length=20)
    fame_impact: int
    is_featured: bool = Field(default=False)


class FestivalMerchSale(Base, table=True):
    """Table: festival_merch_sales"""

    __tablename__ = "festival_merch_sales"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    performance_id: str = Field(foreign_key="festival_performance_history.id", index=True, max_length=36)
    band_id: str = Field(max_length=36)
    festival_id: str = Field(max_length=36)
    tshirts_sold: int
    posters_sold: int
    albums_sold: int
    gross_revenue: int
    festival_cut: int
    net_revenue: int
    performance_boost: float
