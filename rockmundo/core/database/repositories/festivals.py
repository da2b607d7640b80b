"""Festival data access."""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.festivals import (
    FestivalMerchSale,
    FestivalParticipant,
    FestivalPerformanceHistory,
    FestivalReview,
)
from .base import AsyncBaseRepository


class FestivalRepository(AsyncBaseRepository[FestivalParticipant]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FestivalParticipant)

    async def list_reviews(self, performance_id: str) -> List[FestivalReview]:
        stmt = select(FestivalReview).where(FestivalReview.performance_id == performance_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_history(self, participation_id: str) -> List[FestivalPerformanceHistory]:
        stmt = select(FestivalPerformanceHistory).where(
            FestivalPerformanceHistory.participation_id == participation_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_merch_sale(self, performance_id: str) -> FestivalMerchSale | None:
        stmt = select(FestivalMerchSale).where(FestivalMerchSale.performance_id == performance_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()
