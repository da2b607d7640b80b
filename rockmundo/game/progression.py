"""
Progression currency rules.

Daily stipend with streak milestones, attribute point spending and the
health drain charged for timed activities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from rockmundo.errors import ValidationError

from .numbers import round_half_up

BASE_STIPEND_SXP = 100
BASE_STIPEND_AP = 10
DEFAULT_ATTRIBUTE_VALUE = 10


@dataclass(frozen=True)
class StreakMilestone:
    days: int
    bonus_sxp: int
    bonus_ap: int


STREAK_MILESTONES = (
    StreakMilestone(7, 50, 10),
    StreakMilestone(14, 100, 20),
    StreakMilestone(30, 200, 40),
    StreakMilestone(100, 500, 100),
    StreakMilestone(365, 1000, 200),
)

ATTRIBUTE_KEYS = (
    "physical_endurance",
    "mental_focus",
    "stage_presence",
    "crowd_engagement",
    "social_reach",
    "creativity",
    "technical",
    "business",
    "marketing",
    "composition",
    "musical_ability",
    "vocal_talent",
    "rhythm_sense",
    "creative_insight",
    "technical_mastery",
    "business_acumen",
    "marketing_savvy",
)

# Health points lost per hour of activity
HEALTH_DRAIN_PER_HOUR = {
    "busking_session": 5,
    "gig": 8,
    "recording": 4,
    "jam_session": 3,
    "songwriting": 2,
    "travel": 6,
}
DEFAULT_HEALTH_DRAIN_PER_HOUR = 3

ACTION_XP_EVENT_TYPE = "action_xp"
ACTION_XP_WINDOW_SECONDS = 60
ACTION_XP_MAX_ENTRIES = 20

# Metadata keys a client may use to identify the event an award belongs to
UNIQUE_EVENT_ID_KEYS = (
    "unique_event_id",
    "event_id",
    "eventId",
    "source_id",
    "sourceId",
    "quest_id",
    "questId",
    "session_id",
    "sessionId",
    "transaction_id",
    "transactionId",
)


@dataclass(frozen=True)
class Stipend:
    streak: int
    base_sxp: int
    base_ap: int
    bonus_sxp: int
    bonus_ap: int
    milestones: list[int] = field(default_factory=list)

    @property
    def total_sxp(self) -> int:
        return self.base_sxp + self.bonus_sxp

    @property
    def total_ap(self) -> int:
        return self.base_ap + self.bonus_ap


def next_streak(last_claim: Optional[date], current_streak: int, today: date) -> int:
    """Streak after claiming today: extended on consecutive days, otherwise restarted."""
    if last_claim is not None and (today - last_claim).days == 1:
        return current_streak + 1
    return 1


def daily_stipend(streak: int) -> Stipend:
    """Stipend for a claim at ``streak`` days; every milestone reached adds its bonus."""
    reached = [m for m in STREAK_MILESTONES if streak >= m.days]
    return Stipend(
        streak=streak,
        base_sxp=BASE_STIPEND_SXP,
        base_ap=BASE_STIPEND_AP,
        bonus_sxp=sum(m.bonus_sxp for m in reached),
        bonus_ap=sum(m.bonus_ap for m in reached),
        milestones=[m.days for m in reached],
    )


def check_spend(balance: int, amount: int, currency: str) -> None:
    """Reject non-positive spends and spends above the balance."""
    if amount <= 0:
        raise ValidationError(f"{currency} amount must be positive")
    if balance < amount:
        raise ValidationError(f"Insufficient {currency}. You have {balance} but need {amount}.")


def raise_attribute(attribute_key: str, current_value: Optional[int], points: int) -> int:
    """New attribute value after spending ``points``; one point buys one attribute point."""
    if attribute_key not in ATTRIBUTE_KEYS:
        raise ValidationError(f"Unknown attribute: {attribute_key}")
    base = DEFAULT_ATTRIBUTE_VALUE if current_value is None else current_value
    return base + points


def health_drain(activity_type: str, duration_minutes: Optional[float]) -> int:
    """Health lost to an activity of the given length; untimed activities cost nothing."""
    if not duration_minutes:
        return 0
    hourly = HEALTH_DRAIN_PER_HOUR.get(activity_type, DEFAULT_HEALTH_DRAIN_PER_HOUR)
    return round_half_up(hourly * duration_minutes / 60)


def resolve_unique_event_id(metadata: Mapping[str, Any]) -> Optional[str]:
    """First non-empty event identifier in ``metadata``, used to reject replayed awards."""
    for key in UNIQUE_EVENT_ID_KEYS:
        value = metadata.get(key)
        if isinstance(value, (str, int)) and not isinstance(value, bool) and str(value).strip():
            return str(value).strip()
    return None
