"""Rehearsal booking I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingWindowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    band_id: str
    scheduled_start: datetime
    scheduled_end: datetime
    status: str


class AvailabilityRead(BaseModel):
    room_id: str
    start: datetime
    end: datetime
    available: bool
    conflicts: List[BookingWindowRead]


class SlotRead(BaseModel):
    start: datetime
    end: datetime
    available: bool


class RehearsalBookingCreate(BaseModel):
    band_id: str
    room_id: str
    scheduled_start: datetime
    duration_hours: int = Field(ge=1, le=8)
    song_id: Optional[str] = None


class RehearsalRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    band_id: str
    rehearsal_room_id: str
    scheduled_start: datetime
    scheduled_end: datetime
    duration_hours: int
    total_cost: int
    status: str
    chemistry_gain: int
    xp_earned: int
    familiarity_gained: int
    selected_song_id: Optional[str] = None
