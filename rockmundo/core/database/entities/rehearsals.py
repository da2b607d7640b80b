"""
Rehearsal entity models.

Rooms are rented by the hour; a booking occupies one room for a half-open
``[scheduled_start, scheduled_end)`` interval.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class RehearsalRoom(Base, table=True):
    """Table: rehearsal_rooms"""

    __tablename__ = "rehearsal_rooms"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    hourly_rate: int = Field(default=0)
    quality_rating: int = Field(default=50, ge=0, le=100)
    equipment_quality: int = Field(default=50, ge=0, le=100)


class BandRehearsal(Base, table=True):
    """Table: band_rehearsals"""

    __tablename__ = "band_rehearsals"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    band_id: str = Field(foreign_key="bands.id", index=True, max_length=36)
    rehearsal_room_id: str = Field(foreign_key="rehearsal_rooms.id", index=True, max_length=36)
    scheduled_start: datetime
    scheduled_end: datetime
    duration_hours: int
    total_cost: int
    selected_song_id: Optional[str] = Field(default=None, max_length=36)
    status: str = Field(default="scheduled", max_length=20)
    chemistry_gain: int = Field(default=0)
    xp_earned: int = Field(default=0)
    familiarity_gained: int = Field(default=0)
    completed_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<BandRehearsal(room={self.rehearsal_room_id}, start={self.scheduled_start}, status={self.status})>"


class BandSongFamiliarity(Base, table=True):
    """Table: band_song_familiarity"""

    __tablename__ = "band_song_familiarity"
    __table_args__ = (UniqueConstraint("band_id", "song_id"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    band_id: str = Field(foreign_key="bands.id", index=True, max_length=36)
    song_id: str = Field(max_length=36)
    familiarity_minutes: int = Field(default=0)
    last_rehearsed_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
