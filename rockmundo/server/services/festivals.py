"""Festival performance completion."""

from __future__ import annotations

import random
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.entities.festivals import (
    FestivalMerchSale,
    FestivalPerformanceHistory,
    FestivalReview,
)
from rockmundo.core.database.entities.inbox import InboxMessage
from rockmundo.core.database.repositories import BandRepository, FestivalRepository
from rockmundo.core.logging_config import get_logger
from rockmundo.core.models.io.festivals import CompleteFestivalPerformanceRequest
from rockmundo.core.monitoring import log_reward_grant
from rockmundo.errors import NotFoundError
from rockmundo.game.festivals import FestivalOutcome, evaluate_performance
from rockmundo.server.core.config import settings

logger = get_logger(__name__)

HIGH_PRIORITY_SCORE = 80


@dataclass(frozen=True)
class FestivalCompletion:
    history_id: str
    outcome: FestivalOutcome


def result_message(score: float, outcome: FestivalOutcome) -> str:
    rewards = outcome.rewards
    return (
        f"Your performance scored {score:g}/100!\n\n"
        f"Earnings: ${rewards.payment:,}\n"
        f"Fame: +{rewards.fame}\n"
        f"Merch: ${rewards.merch_net:,}\n"
        f"New Fans: +{rewards.fans}"
    )


class FestivalService:
    """Service behind ``complete-festival-performance``."""

    def __init__(self, session: AsyncSession, rng: random.Random):
        self.session = session
        self.rng = rng
        self.festivals = FestivalRepository(session)
        self.bands = BandRepository(session)

    async def complete_performance(self, request: CompleteFestivalPerformanceRequest) -> FestivalCompletion:
        """
        Settle a festival set.

        Writes the performance history, press reviews and merch sales, marks the
        slot as performed, pays the band (slot payment plus its merch share)
        and drops a result message into the player's inbox.
        """
        try:
            participation = await self.festivals.get_by_id(request.participation_id)
            if participation is None:
                raise NotFoundError(f"Participation not found: {request.participation_id}")

            band = await self.bands.get_by_id(request.band_id)
            if band is None:
                raise NotFoundError("Band not found")

            score = request.performance_score
            outcome = evaluate_performance(
                band_name=band.name,
                score=score,
                crowd_energy_peak=request.crowd_energy_peak,
                crowd_energy_avg=request.crowd_energy_avg,
                event_responses=request.event_responses,
                rng=self.rng,
                base_payment=participation.payout_amount or settings.game.default_festival_payout,
            )
            rewards = outcome.rewards

            history = FestivalPerformanceHistory(
                participation_id=participation.id,
                band_id=band.id,
                festival_id=participation.event_id,
                user_id=participation.user_id,
                performance_score=score,
                crowd_energy_peak=request.crowd_energy_peak,
                crowd_energy_avg=request.crowd_energy_avg,
                songs_performed=request.songs_performed,
                payment_earned=rewards.payment,
                fame_earned=rewards.fame,
                merch_revenue=rewards.merch_gross,
                new_fans_gained=rewards.fans,
                critic_score=outcome.critic_score,
                fan_score=outcome.fan_score,
                review_headline=outcome.headline,
                review_summary=outcome.summary,
                highlight_moments=list(outcome.highlights),
                slot_type=participation.slot_type,
            )
            await self.festivals.add(history)

            self.session.add_all(
                [
                    FestivalReview(
                        performance_id=history.id,
                        band_id=band.id,
                        reviewer_type=review.publication.type,
                        publication_name=review.publication.name,
                        score=review.score,
                        headline=review.headline,
                        review_text=review.text,
                        sentiment=review.sentiment,
                        fame_impact=review.fame_impact,
                        is_featured=review.is_featured,
                    )
                    for review in outcome.reviews
                ]
            )
            self.session.add(
                FestivalMerchSale(
                    performance_id=history.id,
                    band_id=band.id,
                    festival_id=participation.event_id,
                    tshirts_sold=outcome.merch.tshirts,
                    posters_sold=outcome.merch.posters,
                    albums_sold=outcome.merch.albums,
                    gross_revenue=rewards.merch_gross,
                    festival_cut=rewards.merch_festival_cut,
                    net_revenue=rewards.merch_net,
                    performance_boost=rewards.score_multiplier,
                )
            )

            participation.status = "performed"
            self.session.add(participation)

            band.fame = (band.fame or 0) + rewards.fame
            await self.bands.record_earning(
                band,
                rewards.payment + rewards.merch_net,
                source="festival",
                description="Festival performance",
                details={
                    "participation_id": participation.id,
                    "payment": rewards.payment,
                    "merch_net": rewards.merch_net,
                },
            )

            self.session.add(
                InboxMessage(
                    user_id=participation.user_id,
                    subject="Festival Performance Complete!",
                    content=result_message(score, outcome),
                    message_type="festival_result",
                    priority="high" if score >= HIGH_PRIORITY_SCORE else "normal",
                )
            )

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            f"Festival set {participation.id} by band {band.id} settled: score={score}, "
            f"payment={rewards.payment}, reviews={len(outcome.reviews)}"
        )
        log_reward_grant(
            "festival",
            band_id=band.id,
            cash=rewards.payment,
            merch=rewards.merch_net,
            fame=rewards.fame,
            fans=rewards.fans,
        )
        return FestivalCompletion(history_id=history.id, outcome=outcome)
