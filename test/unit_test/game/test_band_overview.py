"""Unit tests for the band overview chart series."""

from datetime import datetime, timedelta

import pytest

from rockmundo.game.band_overview import (
    activity_breakdown,
    chemistry_label,
    days_together,
    engagement_trend,
    fame_progress,
    profile_metrics,
    trend_base_value,
)

NOW = datetime(2026, 9, 1, 12, 0)


class TestEngagementTrend:
    def test_base_value(self):
        assert trend_base_value(1000, 0) == 400
        assert trend_base_value(1000, 20_000) == 1000

    def test_five_weekly_points_ending_now(self):
        points = engagement_trend(weekly_fans=1000, total_fame=5000, lifetime_fame=0)

        assert [p.label for p in points] == ["Week -4", "Week -3", "Week -2", "Week -1", "Week Now"]
        assert (points[0].fans, points[0].fame) == (610, 1750)
        assert (points[-1].fans, points[-1].fame) == (1000, 5000)

    def test_trend_rises_towards_current_value(self):
        fans = [p.fans for p in engagement_trend(1000, 5000, 2000)]
        assert fans == sorted(fans)


class TestMetrics:
    def test_days_together(self):
        assert days_together(None, NOW) == 0
        assert days_together(NOW - timedelta(days=10, hours=3), NOW) == 10

    def test_activity_breakdown(self):
        metrics = activity_breakdown(performance_count=12, jam_count=4, days=30)
        assert [(m.name, m.value) for m in metrics] == [
            ("Performances", 12),
            ("Jam Sessions", 4),
            ("Days Together", 30),
        ]

    def test_profile_metrics(self):
        metrics = profile_metrics(popularity=55, skill_rating=62.5, chemistry_level=40, cohesion_score=70)
        assert [m.name for m in metrics] == ["Popularity", "Skill", "Chemistry", "Cohesion"]
        assert metrics[1].value == 62.5

    @pytest.mark.parametrize("fame,progress", [(0, 0.0), (2500, 50.0), (1000, 0.0)])
    def test_fame_progress(self, fame, progress):
        assert fame_progress(fame) == pytest.approx(progress)


class TestChemistryLabel:
    @pytest.mark.parametrize(
        "level,label",
        [(0, "Poor"), (24, "Poor"), (25, "Fair"), (50, "Good"), (70, "Good"), (75, "Excellent"), (90, "Legendary"), (100, "Legendary")],
    )
    def test_thresholds(self, level, label):
        assert chemistry_label(level) == label
