"""Unit tests for the progression currency rules."""

from datetime import date, timedelta

import pytest

from rockmundo.errors import ValidationError
from rockmundo.game.progression import (
    check_spend,
    daily_stipend,
    health_drain,
    next_streak,
    raise_attribute,
    resolve_unique_event_id,
)

TODAY = date(2026, 5, 10)


class TestStreak:
    def test_first_claim_starts_streak(self):
        assert next_streak(None, 0, TODAY) == 1

    def test_consecutive_day_extends_streak(self):
        assert next_streak(TODAY - timedelta(days=1), 3, TODAY) == 4

    def test_gap_resets_streak(self):
        assert next_streak(TODAY - timedelta(days=2), 9, TODAY) == 1


class TestDailyStipend:
    def test_base_stipend(self):
        stipend = daily_stipend(1)

        assert stipend.total_sxp == 100
        assert stipend.total_ap == 10
        assert stipend.milestones == []

    def test_week_milestone(self):
        stipend = daily_stipend(7)

        assert stipend.bonus_sxp == 50
        assert stipend.bonus_ap == 10
        assert stipend.milestones == [7]

    def test_milestones_are_cumulative(self):
        stipend = daily_stipend(30)

        assert stipend.total_sxp == 450
        assert stipend.total_ap == 80
        assert stipend.milestones == [7, 14, 30]


class TestSpending:
    def test_spend_within_balance(self):
        check_spend(10, 10, "Skill XP")

    def test_insufficient_balance(self):
        with pytest.raises(ValidationError, match="Insufficient Skill XP. You have 10 but need 11."):
            check_spend(10, 11, "Skill XP")

    @pytest.mark.parametrize("amount", [0, -3])
    def test_non_positive_spend(self, amount):
        with pytest.raises(ValidationError, match="must be positive"):
            check_spend(10, amount, "Attribute Points")

    def test_raise_attribute(self):
        assert raise_attribute("creativity", 12, 3) == 15
        assert raise_attribute("creativity", None, 5) == 15

    def test_unknown_attribute(self):
        with pytest.raises(ValidationError, match="Unknown attribute"):
            raise_attribute("luck", 10, 1)


class TestHealthDrain:
    @pytest.mark.parametrize(
        "activity,minutes,drain",
        [("gig", 90, 12), ("busking_session", 60, 5), ("unknown", 30, 2), ("gig", None, 0), ("gig", 0, 0)],
    )
    def test_drain(self, activity, minutes, drain):
        assert health_drain(activity, minutes) == drain


class TestUniqueEventId:
    def test_explicit_id_wins(self):
        assert resolve_unique_event_id({"unique_event_id": "gig-1", "event_id": "other"}) == "gig-1"

    @pytest.mark.parametrize("key", ["event_id", "sessionId", "quest_id", "transactionId"])
    def test_aliases(self, key):
        assert resolve_unique_event_id({key: "abc"}) == "abc"

    def test_numeric_ids_become_strings(self):
        assert resolve_unique_event_id({"source_id": 17}) == "17"

    @pytest.mark.parametrize("metadata", [{}, {"event_id": "  "}, {"event_id": True}, {"event_id": None}])
    def test_missing_or_blank(self, metadata):
        assert resolve_unique_event_id(metadata) is None
