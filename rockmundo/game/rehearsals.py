"""
Rehearsal booking rules.

Availability is a linear scan over the room's fetched bookings; the database
still enforces the authoritative overlap constraint when the row is written.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, Optional, Protocol

from rockmundo.core.timeutils import as_utc
from rockmundo.errors import ValidationError

INACTIVE_STATUSES = frozenset({"completed", "cancelled"})
MIN_DURATION_HOURS = 1
MAX_DURATION_HOURS = 8
MAX_CHEMISTRY = 100
MAX_SONG_FAMILIARITY_MINUTES = 60

# Hourly start times offered by the booking dialog, UTC
OPENING_HOUR = 8
CLOSING_HOUR = 24


class Booking(Protocol):
    scheduled_start: datetime
    scheduled_end: datetime
    status: str


@dataclass(frozen=True)
class RehearsalRewards:
    chemistry_gain: int
    xp_earned: int
    familiarity_gained: int


@dataclass(frozen=True)
class Slot:
    start: datetime
    end: datetime
    available: bool


def validate_duration(hours: int) -> None:
    if not MIN_DURATION_HOURS <= hours <= MAX_DURATION_HOURS:
        raise ValidationError(f"Rehearsals last between {MIN_DURATION_HOURS} and {MAX_DURATION_HOURS} hours")


def booking_window(start: datetime, hours: int) -> tuple[datetime, datetime]:
    validate_duration(hours)
    start = as_utc(start)
    return start, start + timedelta(hours=hours)


def find_conflicts(bookings: Iterable[Booking], start: datetime, end: datetime) -> list[Booking]:
    """Bookings overlapping ``[start, end)``; finished and cancelled ones never block."""
    start, end = as_utc(start), as_utc(end)
    return [
        b
        for b in bookings
        if b.status not in INACTIVE_STATUSES
        and as_utc(b.scheduled_start) < end
        and start < as_utc(b.scheduled_end)
    ]


def is_slot_available(bookings: Iterable[Booking], start: datetime, end: datetime) -> bool:
    return not find_conflicts(bookings, start, end)


def day_slots(bookings: Iterable[Booking], day: date, hours: int) -> list[Slot]:
    """Every hourly start on ``day`` that fits before closing, flagged free or taken."""
    validate_duration(hours)
    bookings = list(bookings)
    slots = []
    for hour in range(OPENING_HOUR, CLOSING_HOUR - hours + 1):
        start = datetime.combine(day, time(hour, tzinfo=timezone.utc))
        end = start + timedelta(hours=hours)
        slots.append(Slot(start=start, end=end, available=is_slot_available(bookings, start, end)))
    return slots


def rehearsal_cost(hourly_rate: int, hours: int) -> int:
    return hourly_rate * hours


def rehearsal_rewards(quality_rating: int, equipment_quality: int, hours: int) -> RehearsalRewards:
    """Chemistry from room quality, XP from equipment quality, familiarity per minute rehearsed."""
    return RehearsalRewards(
        chemistry_gain=math.floor(quality_rating / 10 * hours),
        xp_earned=math.floor(50 * hours * (equipment_quality / 100)),
        familiarity_gained=hours * 60,
    )


def check_affordable(band_balance: int, cost: int) -> None:
    if band_balance < cost:
        raise ValidationError(f"Your band needs ${cost}. Current balance: ${band_balance}")


def apply_chemistry(chemistry_level: int, gain: int) -> int:
    return min(MAX_CHEMISTRY, chemistry_level + gain)


def song_familiarity(current_minutes: Optional[int], gained_minutes: int) -> int:
    """Familiarity with a song after rehearsing it, capped at MAX_SONG_FAMILIARITY_MINUTES."""
    return min(MAX_SONG_FAMILIARITY_MINUTES, (current_minutes or 0) + gained_minutes)
