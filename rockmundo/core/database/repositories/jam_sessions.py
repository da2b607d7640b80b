"""Jam session data access."""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.jam_sessions import JamGiftedSongLog, JamSession, JamSessionParticipant
from .base import AsyncBaseRepository


class JamSessionRepository(AsyncBaseRepository[JamSession]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, JamSession)

    async def list_participants(self, session_id: str) -> List[JamSessionParticipant]:
        stmt = select(JamSessionParticipant).where(JamSessionParticipant.jam_session_id == session_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_gifts_since(self, profile_id: str, since: datetime) -> int:
        """Number of gifted songs a profile received at or after ``since``."""
        stmt = (
            select(func.count())
            .select_from(JamGiftedSongLog)
            .where((JamGiftedSongLog.profile_id == profile_id) & (JamGiftedSongLog.created_at >= since))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
