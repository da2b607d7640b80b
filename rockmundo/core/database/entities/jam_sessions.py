"""
Jam session entity models.

A jam session is hosted by one profile and joined by others; completing it
writes one outcome row per participant and may gift a demo song.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class JamSession(Base, table=True):
    """Table: jam_sessions"""

    __tablename__ = "jam_sessions"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    host_id: str = Field(foreign_key="profiles.id", index=True, max_length=36)
    name: str = Field(default="Jam Session", max_length=255)
    genre: Optional[str] = Field(default=None, max_length=100)
    tempo: Optional[int] = Field(default=None)
    status: str = Field(default="waiting", max_length=20)
    max_participants: int = Field(default=4)
    mood_score: Optional[int] = Field(default=None)
    synergy_score: Optional[int] = Field(default=None)
    total_xp_awarded: Optional[int] = Field(default=None)
    gifted_song_id: Optional[str] = Field(default=None, max_length=36)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<JamSession(id={self.id}, host_id={self.host_id}, status={self.status})>"


class JamSessionParticipant(Base, table=True):
    """Table: jam_session_participants"""

    __tablename__ = "jam_session_participants"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    jam_session_id: str = Field(foreign_key="jam_sessions.id", index=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", max_length=36)
    instrument_skill_slug: Optional[str] = Field(default=None, max_length=100)
    joined_at: datetime = Field(default_factory=utc_now)


class JamSessionOutcome(Base, table=True):
    """Table: jam_session_outcomes"""

    __tablename__ = "jam_session_outcomes"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    session_id: str = Field(foreign_key="jam_sessions.id", index=True, max_length=36)
    participant_id: str = Field(foreign_key="profiles.id", max_length=36)
    xp_earned: int
    chemistry_gained: int
    skill_slug: str = Field(max_length=100)
    skill_xp_gained: int
    gifted_song_id: Optional[str] = Field(default=None, max_length=36)
    performance_rating: int
    created_at: datetime = Field(default_factory=utc_now)


class JamGiftedSongLog(Base, table=True):
    """Table: jam_gifted_song_log"""

    __tablename__ = "jam_gifted_song_log"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", index=True, max_length=36)
    session_id: str = Field(foreign_key="jam_sessions.id", max_length=36)
    song_id: str = Field(max_length=36)
    created_at: datetime = Field(default_factory=utc_now)
