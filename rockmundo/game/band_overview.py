"""
Band overview chart series.

The overview tab has no stored history, so its trend chart interpolates
between an estimated starting point and the band's current numbers. The
series are for display only and must not feed back into game state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from rockmundo.core.timeutils import as_utc

from .numbers import round_half_up

TREND_CHECKPOINTS = (0.35, 0.55, 0.7, 0.85, 1)
FAME_PER_TIER = 1000


@dataclass(frozen=True)
class TrendPoint:
    label: str
    fans: int
    fame: int


@dataclass(frozen=True)
class Metric:
    name: str
    value: float


def trend_base_value(weekly_fans: int, lifetime_fame: int) -> float:
    """Estimated weekly fans four weeks ago."""
    return max(weekly_fans * 0.4, lifetime_fame / 20 if lifetime_fame else weekly_fans * 0.3)


def engagement_trend(weekly_fans: int, total_fame: int, lifetime_fame: int) -> list[TrendPoint]:
    """Five weekly points ending at the current fans and fame ("Week -4" .. "Week Now")."""
    base = trend_base_value(weekly_fans, lifetime_fame)
    last = len(TREND_CHECKPOINTS) - 1
    points = []
    for index, ratio in enumerate(TREND_CHECKPOINTS):
        label = "Week Now" if index == last else f"Week -{last - index}"
        points.append(
            TrendPoint(
                label=label,
                fans=round_half_up(weekly_fans * ratio + base * (1 - ratio)),
                fame=round_half_up(total_fame * ratio + lifetime_fame * (1 - ratio)),
            )
        )
    return points


def days_together(created_at: Optional[datetime], now: datetime) -> int:
    if created_at is None:
        return 0
    return (as_utc(now) - as_utc(created_at)).days


def activity_breakdown(performance_count: int, jam_count: int, days: int) -> list[Metric]:
    return [
        Metric("Performances", performance_count),
        Metric("Jam Sessions", jam_count),
        Metric("Days Together", days),
    ]


def profile_metrics(popularity: int, skill_rating: float, chemistry_level: int, cohesion_score: int) -> list[Metric]:
    return [
        Metric("Popularity", popularity),
        Metric("Skill", skill_rating),
        Metric("Chemistry", chemistry_level),
        Metric("Cohesion", cohesion_score),
    ]


def fame_progress(fame: int) -> float:
    """Percent progress through the current thousand fame points."""
    return (fame % FAME_PER_TIER) / FAME_PER_TIER * 100


CHEMISTRY_LABELS = (
    (90, "Legendary"),
    (75, "Excellent"),
    (50, "Good"),
    (25, "Fair"),
)


def chemistry_label(chemistry_level: int) -> str:
    for threshold, label in CHEMISTRY_LABELS:
        if chemistry_level >= threshold:
            return label
    return "Poor"
