"""
Jam session rules.

Rewards for completing a jam session (shared XP, per-instrument skill XP,
chemistry, performance rating and the rare gifted demo song), and the cost
split used when booking or leaving a session early.
"""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from rockmundo.core.timeutils import as_utc
from rockmundo.errors import ValidationError

from .skills import TIER_XP_MULTIPLIERS, skill_tier

MIN_DURATION_MINUTES = 10
MAX_DURATION_MINUTES = 120
DEFAULT_SKILL_SLUG = "instruments_basic_acoustic_guitar"

INSTRUMENT_TO_SKILL = {
    # Strings
    "acoustic guitar": "instruments_{tier}_acoustic_guitar",
    "electric guitar": "instruments_{tier}_electric_guitar",
    "classical guitar": "instruments_{tier}_classical_guitar",
    "bass": "instruments_{tier}_bass_guitar",
    "bass guitar": "instruments_{tier}_bass_guitar",
    "upright bass": "instruments_{tier}_upright_bass",
    "violin": "instruments_{tier}_violin",
    "viola": "instruments_{tier}_viola",
    "cello": "instruments_{tier}_cello",
    "banjo": "instruments_{tier}_banjo",
    "mandolin": "instruments_{tier}_mandolin",
    "ukulele": "instruments_{tier}_ukulele",
    "harp": "instruments_{tier}_harp",
    # Keys
    "keyboard": "instruments_{tier}_keyboard",
    "piano": "instruments_{tier}_piano",
    "synthesizer": "instruments_{tier}_synthesizer",
    "organ": "instruments_{tier}_organ",
    # Percussion
    "drums": "instruments_{tier}_drums",
    "percussion": "instruments_{tier}_percussion",
    "congas": "instruments_{tier}_congas",
    "bongos": "instruments_{tier}_bongos",
    "djembe": "instruments_{tier}_djembe",
    "cajon": "instruments_{tier}_cajon",
    # Vocals
    "vocals": "instruments_{tier}_vocals",
    "lead vocals": "instruments_{tier}_vocals",
    "backup vocals": "instruments_{tier}_backup_vocals",
    # Winds
    "saxophone": "instruments_{tier}_saxophone",
    "trumpet": "instruments_{tier}_trumpet",
    "trombone": "instruments_{tier}_trombone",
    "clarinet": "instruments_{tier}_clarinet",
    "flute": "instruments_{tier}_flute",
    # Electronic
    "turntables": "instruments_{tier}_turntables",
    "dj": "instruments_{tier}_turntables",
}

SONG_TITLE_PREFIXES = (
    "Midnight", "Electric", "Groove", "Sunset", "Urban", "Cosmic", "Velvet",
    "Neon", "Crystal", "Thunder", "Golden", "Silver", "Mystic", "Wild",
)
SONG_TITLE_SUFFIXES = (
    "Jam", "Session", "Vibes", "Flow", "Rhythm", "Beat", "Groove",
    "Moment", "Dream", "Wave", "Pulse", "Echo", "Fire", "Spirit",
)

GIFTED_SONG_BASE_CHANCE = 0.0075
GIFTED_SONG_PER_EXTRA_PLAYER = 0.0025
GIFTED_SONG_SYNERGY_BONUS = 0.005
GIFTED_SONG_MOOD_BONUS = 0.0025
GIFTED_SONG_MAX_CHANCE = 0.025

# (share of the session still ahead, fraction of the reward kept)
EARLY_LEAVE_MULTIPLIERS = (
    (75, 0.10),
    (50, 0.25),
    (25, 0.50),
    (10, 0.75),
)


@dataclass(frozen=True)
class SessionScores:
    duration_minutes: int
    instrument_diversity: int
    synergy: int
    mood: int


@dataclass(frozen=True)
class XpBreakdown:
    base: int
    synergy_bonus: int
    mood_bonus: int
    participant_bonus: int

    @property
    def total(self) -> int:
        return self.base + self.synergy_bonus + self.mood_bonus + self.participant_bonus


@dataclass(frozen=True)
class GiftedSong:
    title: str
    quality_score: int
    duration_seconds: int


def skill_slug_for_instrument(instrument: str, current_xp: int = 0) -> str:
    """Skill slug practised by playing ``instrument`` at the tier its XP reaches."""
    tier = skill_tier(current_xp)
    template = INSTRUMENT_TO_SKILL.get(instrument.lower())
    if template is None:
        slug = re.sub(r"\s+", "_", instrument.lower())
        return f"instruments_{tier}_{slug}"
    return template.replace("{tier}", tier)


def session_duration_minutes(started_at: datetime, now: datetime) -> int:
    """Whole minutes played, clamped to 10..120."""
    elapsed = math.floor((as_utc(now) - as_utc(started_at)).total_seconds() / 60)
    return max(MIN_DURATION_MINUTES, min(MAX_DURATION_MINUTES, elapsed))


def instrument_diversity(skill_slugs: Iterable[Optional[str]]) -> int:
    return max(1, len({slug for slug in skill_slugs if slug}))


def roll_scores(
    duration_minutes: int,
    diversity: int,
    rng: random.Random,
    session_mood: Optional[int] = None,
) -> SessionScores:
    """Synergy and mood for the session; a mood already set on the session wins."""
    synergy = min(100, 50 + diversity * 10 + rng.randrange(15))
    mood = session_mood or min(100, 50 + duration_minutes // 3 + rng.randrange(20))
    return SessionScores(
        duration_minutes=duration_minutes,
        instrument_diversity=diversity,
        synergy=synergy,
        mood=mood,
    )


def xp_per_player(duration_minutes: int, diversity: int, mood: int, participant_count: int) -> XpBreakdown:
    """Shared XP every participant earns: 25 per 10 minutes capped at 300, plus bonuses."""
    base = min(12, duration_minutes // 10) * 25
    if mood >= 85:
        mood_bonus = math.floor(base * 0.25)
    elif mood >= 70:
        mood_bonus = math.floor(base * 0.15)
    else:
        mood_bonus = 0
    return XpBreakdown(
        base=base,
        synergy_bonus=math.floor(base * (diversity * 0.10)),
        mood_bonus=mood_bonus,
        participant_bonus=math.floor(base * ((participant_count - 1) * 0.05)),
    )


def skill_xp_gain(duration_minutes: int, current_skill_xp: int) -> int:
    """Instrument skill XP: 5 per 10 minutes, scaled up at higher tiers."""
    base = (duration_minutes // 10) * 5
    return math.floor(base * TIER_XP_MULTIPLIERS[skill_tier(current_skill_xp)])


def chemistry_gain(duration_minutes: int) -> int:
    return (duration_minutes // 15) * 2


def performance_rating(synergy: int, mood: int) -> int:
    return min(100, 50 + synergy // 3 + mood // 5)


def gifted_song_chance(participant_count: int, synergy: int, mood: int) -> float:
    chance = GIFTED_SONG_BASE_CHANCE
    chance += max(0, participant_count - 2) * GIFTED_SONG_PER_EXTRA_PLAYER
    if synergy >= 80:
        chance += GIFTED_SONG_SYNERGY_BONUS
    if mood >= 80:
        chance += GIFTED_SONG_MOOD_BONUS
    return min(GIFTED_SONG_MAX_CHANCE, chance)


def generate_gifted_song(rng: random.Random) -> GiftedSong:
    return GiftedSong(
        title=f"{rng.choice(SONG_TITLE_PREFIXES)} {rng.choice(SONG_TITLE_SUFFIXES)}",
        quality_score=40 + rng.randrange(31),
        duration_seconds=180 + rng.randrange(120),
    )


def cost_per_participant(total_cost: int, max_participants: int) -> int:
    """Share each seat pays when a session's room cost is split evenly."""
    if max_participants <= 0:
        raise ValidationError("max_participants must be positive")
    return math.ceil(total_cost / max_participants)


def join_cost(total_cost: int, max_participants: int, current_participants: int) -> int:
    """Price quoted to the next joiner, split over the seats filled after joining."""
    seats = min(current_participants + 2, max_participants)
    return math.ceil(total_cost / max(1, seats))


def early_leave_multiplier(remaining_percent: float) -> float:
    """Share of the reward kept when leaving with ``remaining_percent`` of the session left."""
    for threshold, multiplier in EARLY_LEAVE_MULTIPLIERS:
        if remaining_percent > threshold:
            return multiplier
    return 1.0


def leave_reward_multiplier(
    status: str,
    started_at: Optional[datetime],
    scheduled_end: Optional[datetime],
    now: datetime,
) -> float:
    """Reward multiplier for a participant leaving a session at ``now``.

    Only an active session with a known schedule penalises leaving.
    """
    if status != "active" or started_at is None or scheduled_end is None:
        return 1.0
    started_at, scheduled_end, now = as_utc(started_at), as_utc(scheduled_end), as_utc(now)
    total = (scheduled_end - started_at).total_seconds()
    if total <= 0:
        return 1.0
    elapsed = (now - started_at).total_seconds()
    return early_leave_multiplier((total - elapsed) / total * 100)
