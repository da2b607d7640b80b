"""
Major event reward rules.

A major event performance is three rated songs. The overall rating is the
mean of the song ratings; cash, fame and fans scale linearly with it inside
the reward range configured on the event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rockmundo.errors import ValidationError

from .numbers import clamp, round_half_up

BASE_FAME = 1000
FAN_CONVERSION = 0.02
SONGS_PER_PERFORMANCE = 3

CROWD_RESPONSES = (
    (90, "ecstatic"),
    (75, "enthusiastic"),
    (55, "engaged"),
    (35, "mixed"),
)


@dataclass(frozen=True)
class MajorEventRewards:
    overall_rating: float
    cash_earned: int
    fame_gained: int
    fans_gained: int


def average_rating(ratings: Sequence[float]) -> float:
    """Mean song rating rounded to one decimal place."""
    if not ratings:
        raise ValidationError("No song performances recorded for this performance")
    return round(sum(ratings) / len(ratings), 1)


def crowd_response(rating: float) -> str:
    """Crowd reaction label for a single song rating."""
    for threshold, label in CROWD_RESPONSES:
        if rating >= threshold:
            return label
    return "disappointed"


def calculate_major_event_rewards(
    overall_rating: float,
    base_cash_reward: int,
    max_cash_reward: int,
    fame_multiplier: float,
    audience_size: int,
) -> MajorEventRewards:
    """
    Rewards for a finished major event performance.

    The rating is clamped to 0..100 before scaling. Cash interpolates between
    the base and max reward; a rating of 0 still pays the base reward.
    """
    rating = float(clamp(overall_rating))
    share = rating / 100

    cash = round_half_up(base_cash_reward + (max(max_cash_reward, base_cash_reward) - base_cash_reward) * share)
    fame = round_half_up(BASE_FAME * fame_multiplier * share)
    fans = round_half_up(audience_size * FAN_CONVERSION * share)

    return MajorEventRewards(overall_rating=rating, cash_earned=cash, fame_gained=fame, fans_gained=fans)
