"""Rehearsal room and booking data access."""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.rehearsals import BandRehearsal, BandSongFamiliarity, RehearsalRoom
from .base import AsyncBaseRepository


class RehearsalRepository(AsyncBaseRepository[BandRehearsal]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BandRehearsal)

    async def get_room(self, room_id: str) -> RehearsalRoom | None:
        return await self.session.get(RehearsalRoom, room_id)

    async def list_room_bookings(self, room_id: str, start: datetime, end: datetime) -> List[BandRehearsal]:
        """Bookings of a room touching ``[start, end)``, active or not.

        Status filtering is left to the overlap rule so cancelled rows can
        still be reported by callers that want them.
        """
        stmt = (
            select(BandRehearsal)
            .where(
                (BandRehearsal.rehearsal_room_id == room_id)
                & (BandRehearsal.scheduled_start < end)
                & (BandRehearsal.scheduled_end > start)
            )
            .order_by(BandRehearsal.scheduled_start)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_song_familiarity(self, band_id: str, song_id: str) -> BandSongFamiliarity | None:
        stmt = select(BandSongFamiliarity).where(
            (BandSongFamiliarity.band_id == band_id) & (BandSongFamiliarity.song_id == song_id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
