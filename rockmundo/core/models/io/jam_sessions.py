"""Jam session completion I/O models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CompleteJamSessionRequest(BaseModel):
    session_id: Optional[str] = Field(default=None, description="jam_sessions.id")


class JamOutcomeRead(BaseModel):
    participant_id: str
    xp_earned: int
    skill_slug: str
    skill_xp_gained: int
    chemistry_gained: int
    performance_rating: int
    received_song: bool


class CompleteJamSessionResponse(BaseModel):
    success: bool = True
    session_id: str
    total_xp_awarded: int
    duration_minutes: int
    synergy_score: int
    mood_score: int
    gifted_song_id: Optional[str] = None
    outcomes: List[JamOutcomeRead]
