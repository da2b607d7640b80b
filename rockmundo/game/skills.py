"""
Skill progression rules.

Training cost, XP curve and level-up rolling for skills, plus the grouping
and filtering the skill tree screen applies to the skill catalogue.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from rockmundo.errors import ValidationError

MAX_SKILL_LEVEL = 100

PROFESSIONAL_TIER_XP = 250
MASTERY_TIER_XP = 650

TIER_XP_MULTIPLIERS = {
    "basic": 1.0,
    "professional": 1.2,
    "mastery": 1.4,
}

# Keyword fragments matched against skill slugs. A skill may sit in several
# categories; skills matching none land in OTHER_CATEGORY.
SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Songwriting & Production": (
        "composing", "lyrics", "production", "daw", "beatmaking", "sampling",
        "sound_design", "mixing", "vocal", "ai_music",
    ),
    "Genres": (
        "rock", "pop", "hip_hop", "jazz", "blues", "edm", "trap", "country", "reggae",
        "metal", "classical", "latin", "rnb", "punk", "flamenco", "african", "drill",
        "lofi", "kpop", "afrobeats", "synthwave", "indie", "hyperpop",
    ),
    "Instruments & Performance": (
        "singing", "rapping", "brass", "keyboard", "percussion", "strings", "woodwind",
        "electronic_instruments", "modern_bass", "synths_keys", "wind_instruments",
        "world_folk", "dj", "midi", "piano", "drums", "guitar", "sound_engineering",
        "songwriting_arrangement", "orchestral_cinematic", "hybrid_experimental",
        "digital_music_tools",
    ),
    "Stage & Showmanship": (
        "showmanship", "stage_tech", "visual", "social_media", "streaming", "crowd",
    ),
}
OTHER_CATEGORY = "Other"

SORT_KEYS = ("name", "level", "cost")


@dataclass(frozen=True)
class SkillLevelResult:
    """Outcome of pouring XP into a skill."""

    level: int
    current_xp: int
    required_xp: int
    levels_gained: int


def training_cost(level: int) -> int:
    """XP cost of one training session at ``level``; never below 10."""
    return max(10, level * 10)


def required_xp(level: int) -> int:
    """XP needed to advance from ``level`` to the next level."""
    return math.floor(100 * 1.5**level)


def skill_tier(current_xp: int) -> str:
    """Tier a skill is practised at, from the XP held in it."""
    if current_xp >= MASTERY_TIER_XP:
        return "mastery"
    if current_xp >= PROFESSIONAL_TIER_XP:
        return "professional"
    return "basic"


def tier_from_slug(slug: str) -> str:
    """Tier encoded in a catalogue slug such as ``instruments_professional_drums``."""
    for tier in ("mastery", "professional"):
        if tier in slug:
            return tier
    return "basic"


def apply_skill_xp(
    current_level: int,
    current_xp: int,
    xp_amount: int,
    current_required_xp: Optional[int] = None,
) -> SkillLevelResult:
    """
    Add XP to a skill and roll over as many level-ups as it pays for.

    Args:
        current_level: Level before spending (clamped to MAX_SKILL_LEVEL)
        current_xp: XP accumulated towards the next level
        xp_amount: XP to add; must be positive
        current_required_xp: Stored requirement for the current level, if the row has one

    Returns:
        The new level, leftover XP and requirement for the following level.

    Raises:
        ValidationError: If ``xp_amount`` is not positive.
    """
    if xp_amount <= 0:
        raise ValidationError("XP amount must be positive")

    level = min(current_level, MAX_SKILL_LEVEL)
    start_level = level
    remaining = current_xp + xp_amount
    needed = current_required_xp if current_required_xp is not None else required_xp(level)

    while level < MAX_SKILL_LEVEL and remaining >= needed:
        remaining -= needed
        level += 1
        needed = required_xp(level)

    if level >= MAX_SKILL_LEVEL:
        level = MAX_SKILL_LEVEL
        remaining = min(remaining, current_xp)

    return SkillLevelResult(
        level=level,
        current_xp=remaining,
        required_xp=required_xp(level),
        levels_gained=level - start_level,
    )


def categorize_skills(skills: Iterable[Mapping]) -> dict[str, list[Mapping]]:
    """Group skill definitions (mappings with a ``slug``) into the tree categories."""
    grouped: dict[str, list[Mapping]] = {name: [] for name in SKILL_CATEGORIES}
    grouped[OTHER_CATEGORY] = []
    for skill in skills:
        slug = skill["slug"]
        matched = False
        for name, keywords in SKILL_CATEGORIES.items():
            if any(keyword in slug for keyword in keywords):
                grouped[name].append(skill)
                matched = True
        if not matched:
            grouped[OTHER_CATEGORY].append(skill)
    return grouped


def filter_skills(
    skills: Sequence[Mapping],
    progress_levels: Mapping[str, int],
    search: Optional[str] = None,
    category: Optional[str] = None,
    sort: str = "name",
) -> list[Mapping]:
    """
    Search, narrow and sort the skill catalogue.

    Args:
        skills: Skill definitions with ``slug`` and ``display_name``
        progress_levels: Current level per slug for the viewing profile
        search: Case-insensitive fragment matched against name and slug
        category: Category name from SKILL_CATEGORIES (or "Other")
        sort: "name", "level" (highest first) or "cost" (cheapest first)

    Returns:
        The matching skills in display order.
    """
    if sort not in SORT_KEYS:
        raise ValidationError(f"Unknown sort key: {sort}")

    selected: Iterable[Mapping] = skills
    if category:
        grouped = categorize_skills(skills)
        if category not in grouped:
            raise ValidationError(f"Unknown skill category: {category}")
        selected = grouped[category]

    if search:
        needle = search.lower()
        selected = [s for s in selected if needle in s["display_name"].lower() or needle in s["slug"].lower()]

    def level_of(skill: Mapping) -> int:
        return progress_levels.get(skill["slug"], 0)

    if sort == "level":
        return sorted(selected, key=lambda s: (-level_of(s), s["display_name"]))
    if sort == "cost":
        return sorted(selected, key=lambda s: (training_cost(level_of(s)), s["display_name"]))
    return sorted(selected, key=lambda s: s["display_name"])
