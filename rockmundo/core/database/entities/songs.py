"""Song entity model (only the columns the server writes)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Song(Base, table=True):
    """Table: songs"""

    __tablename__ = "songs"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    title: str = Field(max_length=255)
    genre: Optional[str] = Field(default=None, max_length=100)
    tempo: Optional[int] = Field(default=None)
    quality_score: int = Field(default=0)
    status: str = Field(default="draft", max_length=20)
    duration_seconds: Optional[int] = Field(default=None)
    lyrics: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
