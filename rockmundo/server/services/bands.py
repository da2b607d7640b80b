"""Band overview tab data."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.base import utc_now
from rockmundo.core.database.repositories import BandRepository
from rockmundo.core.models.io.bands import BandOverviewRead, MetricRead, TrendPointRead
from rockmundo.errors import NotFoundError
from rockmundo.game import band_overview as charts


class BandService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.bands = BandRepository(session)

    async def overview(self, band_id: str, skill_rating: float = 0, now: Optional[datetime] = None) -> BandOverviewRead:
        band = await self.bands.get_by_id(band_id)
        if band is None:
            raise NotFoundError(f"Band not found: {band_id}")

        # Hosted rows may carry NULL stats
        fame = band.fame or 0
        weekly_fans = band.weekly_fans or 0
        lifetime_fame = band.collective_fame_earned or 0
        chemistry = band.chemistry_level or 0

        days = charts.days_together(band.created_at, now or utc_now())
        return BandOverviewRead(
            band_id=band.id,
            name=band.name,
            fame=fame,
            band_balance=band.band_balance or 0,
            fame_multiplier=band.fame_multiplier or 1,
            fame_progress=charts.fame_progress(fame),
            days_together=days,
            chemistry_level=chemistry,
            chemistry_label=charts.chemistry_label(chemistry),
            engagement_trend=[
                TrendPointRead(label=p.label, fans=p.fans, fame=p.fame)
                for p in charts.engagement_trend(weekly_fans, fame, lifetime_fame)
            ],
            activity_breakdown=[
                MetricRead(name=m.name, value=m.value)
                for m in charts.activity_breakdown(band.performance_count or 0, band.jam_count or 0, days)
            ],
            profile_metrics=[
                MetricRead(name=m.name, value=m.value)
                for m in charts.profile_metrics(band.popularity or 0, skill_rating, chemistry, band.cohesion_score or 0)
            ],
        )
