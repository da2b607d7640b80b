"""Unit tests for the festival performance rules."""

import random

import pytest

from rockmundo.game.festivals import (
    DEFAULT_BASE_PAYMENT,
    HEADLINES,
    REVIEW_PUBLICATIONS,
    calculate_rewards,
    energy_descriptor,
    evaluate_performance,
    generate_reviews,
    headline_category,
    highlight_moments,
    merch_units,
    pick_headline,
    review_count,
    review_sentiment,
    review_text,
)


class MidpointRandom(random.Random):
    """Uniform draws always land on 0.5, so every variance term is zero."""

    def random(self):
        return 0.5


class TestCalculateRewards:
    def test_reward_formulas(self):
        rewards = calculate_rewards(score=80, crowd_energy_avg=60)

        assert rewards.score_multiplier == pytest.approx(1.3)
        assert rewards.energy_multiplier == pytest.approx(1.1)
        assert rewards.payment == 7_150
        assert rewards.fame == 715
        assert rewards.fans == 143
        assert rewards.merch_gross == 1_920
        assert rewards.merch_festival_cut == 384
        assert rewards.merch_net == 1_536

    def test_slot_payout_replaces_default(self):
        assert calculate_rewards(80, 60, base_payment=10_000).payment == 14_300

    @pytest.mark.parametrize("base_payment", [None, 0])
    def test_missing_payout_falls_back_to_default(self, base_payment):
        rewards = calculate_rewards(50, 40, base_payment=base_payment)
        expected = calculate_rewards(50, 40, base_payment=DEFAULT_BASE_PAYMENT)
        assert rewards.payment == expected.payment


class TestCategories:
    @pytest.mark.parametrize(
        "score,category", [(85, "excellent"), (84.9, "good"), (70, "good"), (50, "average"), (49, "poor")]
    )
    def test_headline_category(self, score, category):
        assert headline_category(score) == category

    @pytest.mark.parametrize("score,count", [(80, 3), (79, 2), (60, 2), (59, 1), (0, 1)])
    def test_review_count(self, score, count):
        assert review_count(score) == count

    @pytest.mark.parametrize(
        "score,sentiment", [(75, "positive"), (74, "mixed"), (50, "mixed"), (30, "neutral"), (29, "negative")]
    )
    def test_review_sentiment(self, score, sentiment):
        assert review_sentiment(score) == sentiment

    @pytest.mark.parametrize(
        "energy,word", [(81, "electric"), (80, "energetic"), (61, "energetic"), (41, "steady"), (40, "lukewarm")]
    )
    def test_energy_descriptor(self, energy, word):
        assert energy_descriptor(energy) == word


class TestMerchAndHighlights:
    def test_merch_units(self):
        sales = merch_units(score=80, crowd_energy_avg=60)

        assert sales.tshirts == 24
        assert sales.posters == 13
        assert sales.albums == 8

    def test_all_highlights(self):
        assert highlight_moments(90, 95, [40, 92]) == [
            "Incredible crowd energy peak!",
            "Near-perfect execution",
            "Handled challenges brilliantly",
        ]

    def test_no_highlights(self):
        assert highlight_moments(60, 70, []) == []


class TestReviews:
    def test_headline_names_the_band(self):
        headline = pick_headline(90, "The Testers", random.Random(3))
        assert "The Testers" in headline
        assert headline in [h.replace("{band}", "The Testers") for h in HEADLINES["excellent"]]

    def test_review_text_uses_energy_word(self):
        text = review_text(90, "The Testers", 85)
        assert text.startswith("The Testers took the stage")
        assert "electric energy" in text

    def test_review_count_and_distinct_publications(self):
        reviews = generate_reviews(85, "The Testers", 70, random.Random(11))

        assert len(reviews) == 3
        assert len({r.publication.name for r in reviews}) == 3
        for review in reviews:
            assert 0 <= review.score <= 100
            assert "The Testers" in review.headline

    def test_midpoint_draw_gives_unvaried_scores(self):
        reviews = generate_reviews(70, "Band", 50, MidpointRandom(1))

        assert len(reviews) == 2
        for review in reviews:
            assert review.score == 70
            assert review.sentiment == "mixed"
            assert review.fame_impact == round(20 * review.publication.weight * 2)

    def test_featured_publications(self):
        featured = {p.name for p in REVIEW_PUBLICATIONS if p.weight >= 1.4}
        assert featured == {"Pitchfork Festival Report", "NME Live", "Rolling Stone Festivals"}


class TestEvaluatePerformance:
    def test_same_seed_reproduces_outcome(self):
        first = evaluate_performance("Band", 77, 91, 66, [50, 95], random.Random(42))
        second = evaluate_performance("Band", 77, 91, 66, [50, 95], random.Random(42))

        assert first == second

    def test_critic_and_fan_scores(self):
        outcome = evaluate_performance("Band", 70, 60, 50, [], MidpointRandom(0))

        assert outcome.critic_score == 70
        assert outcome.fan_score == 75
        assert outcome.highlights == []
        assert outcome.rewards == calculate_rewards(70, 50)

    def test_fan_score_is_capped(self):
        outcome = evaluate_performance("Band", 98, 99, 90, [], MidpointRandom(0))
        assert outcome.fan_score == 100
