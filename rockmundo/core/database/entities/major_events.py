"""
Major event entity models.

Major events are yearly showcase concerts (one per calendar month). An
instance is one year's edition; a band accepted into an instance plays a
three-song performance whose per-song ratings decide the payout.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class MajorEvent(Base, table=True):
    """Template of a recurring major event and its reward range.

    Table: major_events
    """

    __tablename__ = "major_events"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    month: int = Field(ge=1, le=12)
    audience_size: int = Field(default=0)
    base_cash_reward: int = Field(default=0)
    max_cash_reward: int = Field(default=0)
    fame_multiplier: float = Field(default=1.0)
    min_fame_required: int = Field(default=0)


class MajorEventInstance(Base, table=True):
    """Table: major_event_instances"""

    __tablename__ = "major_event_instances"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    event_id: str = Field(foreign_key="major_events.id", index=True, max_length=36)
    year: int
    status: str = Field(default="upcoming", max_length=20)


class MajorEventPerformance(Base, table=True):
    """A band's set at a major event instance.

    Status moves accepted -> in_progress -> completed. Rewards are only
    populated once the performance is completed.

    Table: major_event_performances
    """

    __tablename__ = "major_event_performances"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    instance_id: str = Field(foreign_key="major_event_instances.id", index=True, max_length=36)
    band_id: str = Field(foreign_key="bands.id", index=True, max_length=36)
    user_id: str = Field(max_length=36)
    status: str = Field(default="accepted", max_length=20)
    current_song_position: int = Field(default=1)
    song_1_id: Optional[str] = Field(default=None, max_length=36)
    song_2_id: Optional[str] = Field(default=None, max_length=36)
    song_3_id: Optional[str] = Field(default=None, max_length=36)
    overall_rating: Optional[float] = Field(default=None)
    cash_earned: Optional[int] = Field(default=None)
    fame_gained: Optional[int] = Field(default=None)
    fans_gained: Optional[int] = Field(default=None)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<MajorEventPerformance(id={self.id}, band_id={self.band_id}, status={self.status})>"


class MajorEventSongPerformance(Base, table=True):
    """Rating of one song within a major event performance.

    Table: major_event_song_performances
    """

    __tablename__ = "major_event_song_performances"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    performance_id: str = Field(foreign_key="major_event_performances.id", index=True, max_length=36)
    song_id: Optional[str] = Field(default=None, max_length=36)
    position: int = Field(ge=1, le=3)
    rating: float = Field(default=0)
    crowd_response: Optional[str] = Field(default=None, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
