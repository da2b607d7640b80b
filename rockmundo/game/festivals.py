"""
Festival performance rules.

Turns a finished festival set (score, crowd energy, responses to on-stage
events) into payment, fame, fans, merch takings, a review headline, critic
and fan scores, and one to three press reviews.

Random draws come from the ``random.Random`` passed in, so a seeded
generator reproduces a result exactly.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .numbers import clamp, round_half_up

DEFAULT_BASE_PAYMENT = 5000
BASE_FAME = 500
BASE_FANS = 100
BASE_MERCH = 1000
FESTIVAL_MERCH_CUT = 0.2


@dataclass(frozen=True)
class Publication:
    name: str
    type: str
    weight: float


REVIEW_PUBLICATIONS = (
    Publication("Rock Review Weekly", "critic", 1.2),
    Publication("Festival Gazette", "critic", 1.0),
    Publication("Music Underground", "blog", 0.8),
    Publication("LiveMusicFans.com", "fan", 0.6),
    Publication("BandWatch", "industry", 1.1),
    Publication("Pitchfork Festival Report", "critic", 1.5),
    Publication("NME Live", "critic", 1.4),
    Publication("Rolling Stone Festivals", "critic", 1.5),
)

FEATURED_WEIGHT = 1.4

HEADLINES = {
    "excellent": (
        "{band} Delivers a Performance for the Ages",
        "Absolutely Electric: {band} Steals the Show",
        "{band} Sets the Festival Ablaze",
        "A Star-Making Moment for {band}",
        "The Crowd Went Wild for {band}",
    ),
    "good": (
        "{band} Delivers Solid Festival Set",
        "Crowd-Pleasing Performance from {band}",
        "{band} Proves Their Worth",
        "Energetic Show from {band}",
        "{band} Wins Over Festival Crowd",
    ),
    "average": (
        "{band}: Decent But Unmemorable",
        "{band} Plays It Safe",
        "Mixed Results for {band}",
        "{band} Has Room to Grow",
        "A Standard Set from {band}",
    ),
    "poor": (
        "{band} Disappoints Festival Crowd",
        "Rough Night for {band}",
        "Technical Issues Plague {band} Set",
        "{band} Falls Short of Expectations",
        "{band} Needs to Regroup",
    ),
}

REVIEW_TEMPLATES = {
    "excellent": (
        "{band} took the stage and immediately commanded the crowd's attention. With {energy} energy "
        "from start to finish, they delivered one of the standout performances of the festival."
    ),
    "good": (
        "{band} put on a solid show that kept the crowd engaged throughout. The {energy} atmosphere "
        "helped carry the set, and overall the performance was impressive."
    ),
    "average": (
        "{band}'s set was competent but lacked the spark needed to truly stand out. The {energy} crowd "
        "response reflected the middling energy on stage."
    ),
    "poor": (
        "Unfortunately, {band} struggled to connect with the audience. The {energy} crowd response "
        "said it all - this wasn't their night."
    ),
}


@dataclass(frozen=True)
class FestivalRewards:
    score_multiplier: float
    energy_multiplier: float
    payment: int
    fame: int
    fans: int
    merch_gross: int
    merch_festival_cut: int
    merch_net: int


@dataclass(frozen=True)
class MerchSales:
    tshirts: int
    posters: int
    albums: int


@dataclass(frozen=True)
class Review:
    publication: Publication
    score: int
    headline: str
    text: str
    sentiment: str
    fame_impact: int

    @property
    def is_featured(self) -> bool:
        return self.publication.weight >= FEATURED_WEIGHT


@dataclass(frozen=True)
class FestivalOutcome:
    rewards: FestivalRewards
    merch: MerchSales
    headline: str
    summary: str
    critic_score: float
    fan_score: float
    highlights: list[str] = field(default_factory=list)
    reviews: list[Review] = field(default_factory=list)


def headline_category(score: float) -> str:
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 50:
        return "average"
    return "poor"


def energy_descriptor(crowd_energy: float) -> str:
    if crowd_energy > 80:
        return "electric"
    if crowd_energy > 60:
        return "energetic"
    if crowd_energy > 40:
        return "steady"
    return "lukewarm"


def review_text(score: float, band_name: str, crowd_energy: float) -> str:
    template = REVIEW_TEMPLATES[headline_category(score)]
    return template.format(band=band_name, energy=energy_descriptor(crowd_energy))


def review_sentiment(score: float) -> str:
    if score >= 75:
        return "positive"
    if score >= 50:
        return "mixed"
    if score >= 30:
        return "neutral"
    return "negative"


def review_count(score: float) -> int:
    """Number of publications covering the set."""
    if score >= 80:
        return 3
    if score >= 60:
        return 2
    return 1


def calculate_rewards(score: float, crowd_energy_avg: float, base_payment: Optional[int] = None) -> FestivalRewards:
    """
    Money, fame and fans earned by a festival set.

    Args:
        score: Performance score 0..100
        crowd_energy_avg: Average crowd energy 0..100
        base_payment: Slot payout; falsy values fall back to DEFAULT_BASE_PAYMENT
    """
    score_multiplier = 0.5 + score / 100
    energy_multiplier = 0.8 + crowd_energy_avg / 200
    combined = score_multiplier * energy_multiplier

    merch_gross = round_half_up(BASE_MERCH * (score / 50) * (crowd_energy_avg / 50))

    return FestivalRewards(
        score_multiplier=score_multiplier,
        energy_multiplier=energy_multiplier,
        payment=round_half_up((base_payment or DEFAULT_BASE_PAYMENT) * combined),
        fame=round_half_up(BASE_FAME * combined),
        fans=round_half_up(BASE_FANS * combined),
        merch_gross=merch_gross,
        merch_festival_cut=round_half_up(merch_gross * FESTIVAL_MERCH_CUT),
        merch_net=round_half_up(merch_gross * (1 - FESTIVAL_MERCH_CUT)),
    )


def merch_units(score: float, crowd_energy_avg: float) -> MerchSales:
    return MerchSales(
        tshirts=round_half_up((score / 10) * (crowd_energy_avg / 20)),
        posters=round_half_up((score / 15) * (crowd_energy_avg / 25)),
        albums=round_half_up((score / 20) * (crowd_energy_avg / 30)),
    )


def highlight_moments(score: float, crowd_energy_peak: float, event_responses: Sequence[float]) -> list[str]:
    highlights = []
    if crowd_energy_peak >= 90:
        highlights.append("Incredible crowd energy peak!")
    if score >= 85:
        highlights.append("Near-perfect execution")
    if any(response >= 90 for response in event_responses):
        highlights.append("Handled challenges brilliantly")
    return highlights


def pick_headline(score: float, band_name: str, rng: random.Random) -> str:
    return rng.choice(HEADLINES[headline_category(score)]).replace("{band}", band_name)


def generate_reviews(score: float, band_name: str, crowd_energy_avg: float, rng: random.Random) -> list[Review]:
    """Press reviews from a random selection of publications.

    Heavier publications swing further from the performance score; the
    headline pool follows the performance score, not the review score.
    """
    reviews = []
    for publication in rng.sample(REVIEW_PUBLICATIONS, review_count(score)):
        raw = clamp(score + (rng.random() - 0.5) * 15 * publication.weight)
        reviews.append(
            Review(
                publication=publication,
                score=round_half_up(raw),
                headline=pick_headline(score, band_name, rng),
                text=review_text(raw, band_name, crowd_energy_avg),
                sentiment=review_sentiment(raw),
                fame_impact=round_half_up((raw - 50) * publication.weight * 2),
            )
        )
    return reviews


def evaluate_performance(
    band_name: str,
    score: float,
    crowd_energy_peak: float,
    crowd_energy_avg: float,
    event_responses: Sequence[float],
    rng: random.Random,
    base_payment: Optional[int] = None,
) -> FestivalOutcome:
    """Everything a completed festival set produces, before it is persisted."""
    headline = pick_headline(score, band_name, rng)
    critic_variance = math.floor((rng.random() - 0.5) * 20)
    fan_variance = math.floor((rng.random() - 0.5) * 15)

    return FestivalOutcome(
        rewards=calculate_rewards(score, crowd_energy_avg, base_payment),
        merch=merch_units(score, crowd_energy_avg),
        headline=headline,
        summary=review_text(score, band_name, crowd_energy_avg),
        critic_score=clamp(score + critic_variance),
        fan_score=clamp(score + fan_variance + 5),
        highlights=highlight_moments(score, crowd_energy_peak, event_responses),
        reviews=generate_reviews(score, band_name, crowd_energy_avg, rng),
    )
