"""
Major event completion.

Settles a finished three-song major event performance: rates it, pays the
band and marks the performance completed.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.base import utc_now
from rockmundo.core.database.repositories import BandRepository, MajorEventRepository
from rockmundo.core.logging_config import get_logger
from rockmundo.core.monitoring import log_reward_grant
from rockmundo.errors import NotFoundError, ValidationError
from rockmundo.game.major_events import (
    MajorEventRewards,
    average_rating,
    calculate_major_event_rewards,
    crowd_response,
)

logger = get_logger(__name__)


class MajorEventService:
    """Service behind ``complete-major-event``."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.performances = MajorEventRepository(session)
        self.bands = BandRepository(session)

    async def complete_performance(self, performance_id: str) -> MajorEventRewards:
        """
        Complete a major event performance and credit its rewards.

        Updates the performance row, the band's fame, balance and total fans
        and writes a ``major_event`` earning, all in one transaction.

        Args:
            performance_id: major_event_performances.id

        Returns:
            The overall rating and the rewards granted.

        Raises:
            NotFoundError: Unknown performance, event instance or band.
            ValidationError: Already completed, or no songs were rated.
        """
        try:
            performance = await self.performances.get_by_id(performance_id)
            if performance is None:
                raise NotFoundError(f"Performance not found: {performance_id}")
            if performance.status == "completed":
                raise ValidationError("Performance already completed")

            found = await self.performances.get_event_for_instance(performance.instance_id)
            if found is None:
                raise NotFoundError("Event not found for this performance")
            _, event = found

            songs = await self.performances.list_song_performances(performance.id)
            overall = average_rating([song.rating for song in songs])
            for song in songs:
                if song.crowd_response is None:
                    song.crowd_response = crowd_response(song.rating)
                    self.session.add(song)

            rewards = calculate_major_event_rewards(
                overall_rating=overall,
                base_cash_reward=event.base_cash_reward,
                max_cash_reward=event.max_cash_reward,
                fame_multiplier=event.fame_multiplier,
                audience_size=event.audience_size,
            )

            band = await self.bands.get_by_id(performance.band_id)
            if band is None:
                raise NotFoundError("Band not found")

            performance.status = "completed"
            performance.overall_rating = rewards.overall_rating
            performance.cash_earned = rewards.cash_earned
            performance.fame_gained = rewards.fame_gained
            performance.fans_gained = rewards.fans_gained
            performance.completed_at = utc_now()
            self.session.add(performance)

            band.fame = (band.fame or 0) + rewards.fame_gained
            band.total_fans = (band.total_fans or 0) + rewards.fans_gained
            await self.bands.record_earning(
                band,
                rewards.cash_earned,
                source="major_event",
                description=f"{event.name} performance",
                details={"performance_id": performance.id, "overall_rating": rewards.overall_rating},
            )

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            f"Major event performance {performance_id} completed: rating={rewards.overall_rating}, "
            f"cash={rewards.cash_earned}, fame={rewards.fame_gained}, fans={rewards.fans_gained}"
        )
        log_reward_grant(
            "major_event",
            band_id=band.id,
            cash=rewards.cash_earned,
            fame=rewards.fame_gained,
            fans=rewards.fans_gained,
        )
        return rewards
