"""Major event data access."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.major_events import (
    MajorEvent,
    MajorEventInstance,
    MajorEventPerformance,
    MajorEventSongPerformance,
)
from .base import AsyncBaseRepository


class MajorEventRepository(AsyncBaseRepository[MajorEventPerformance]):
    """Repository centred on major event performances."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MajorEventPerformance)

    async def get_event_for_instance(self, instance_id: str) -> Optional[Tuple[MajorEventInstance, MajorEvent]]:
        """Load an instance together with the event template it belongs to."""
        stmt = (
            select(MajorEventInstance, MajorEvent)
            .join(MajorEvent, MajorEvent.id == MajorEventInstance.event_id)
            .where(MajorEventInstance.id == instance_id)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_song_performances(self, performance_id: str) -> List[MajorEventSongPerformance]:
        stmt = (
            select(MajorEventSongPerformance)
            .where(MajorEventSongPerformance.performance_id == performance_id)
            .order_by(MajorEventSongPerformance.position)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
