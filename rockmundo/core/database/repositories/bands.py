"""Band data access."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.bands import Band, BandEarning
from .base import AsyncBaseRepository


class BandRepository(AsyncBaseRepository[Band]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Band)

    async def record_earning(
        self,
        band: Band,
        amount: int,
        source: str,
        description: str | None = None,
        details: dict | None = None,
    ) -> BandEarning:
        """Credit ``amount`` to the band balance and write the matching ledger row."""
        band.band_balance = (band.band_balance or 0) + amount
        earning = BandEarning(
            band_id=band.id,
            amount=amount,
            source=source,
            description=description,
            details=details,
        )
        self.session.add(band)
        self.session.add(earning)
        await self.session.flush()
        return earning
