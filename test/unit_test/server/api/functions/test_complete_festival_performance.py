import random

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from rockmundo.core.database.entities.bands import Band, BandEarning
from rockmundo.core.database.entities.festivals import (
    FestivalMerchSale,
    FestivalParticipant,
    FestivalPerformanceHistory,
    FestivalReview,
)
from rockmundo.core.database.entities.inbox import InboxMessage
from rockmundo.game.festivals import HEADLINES

pytestmark = pytest.mark.asyncio

URL = "/functions/v1/complete-festival-performance"


class MidpointRandom(random.Random):
    """Every draw lands on 0.5, so score variance is zero."""

    def random(self) -> float:
        return 0.5


@pytest.fixture
def rng() -> random.Random:
    return MidpointRandom()


@pytest_asyncio.fixture
async def band(session: AsyncSession) -> Band:
    band = Band(name="The Testers", fame=100)
    session.add(band)
    await session.commit()
    return band


@pytest_asyncio.fixture
async def participation(session: AsyncSession, band: Band) -> FestivalParticipant:
    participation = FestivalParticipant(
        event_id="fest-1", band_id=band.id, user_id="user-1", slot_type="headliner", payout_amount=10_000
    )
    session.add(participation)
    await session.commit()
    return participation


def set_body(participation: FestivalParticipant, **overrides) -> dict:
    body = {
        "participationId": participation.id,
        "bandId": participation.band_id,
        "performanceScore": 80,
        "crowdEnergyPeak": 92,
        "crowdEnergyAvg": 60,
        "eventResponses": [95],
        "songsPerformed": 8,
    }
    body.update(overrides)
    return body


class TestCompleteFestivalPerformance:
    """POST /functions/v1/complete-festival-performance"""

    async def test_response_body(self, client: AsyncClient, participation):
        response = await client.post(URL, json=set_body(participation))

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["performanceScore"] == 80
        assert data["paymentEarned"] == 14_300
        assert data["fameEarned"] == 715
        assert data["newFansGained"] == 143
        assert data["merchRevenue"] == 1_536
        assert data["criticScore"] == 80
        assert data["fanScore"] == 85
        assert data["highlights"] == ["Incredible crowd energy peak!", "Handled challenges brilliantly"]
        assert data["reviewHeadline"] in [h.replace("{band}", "The Testers") for h in HEADLINES["good"]]

    async def test_writes_history_reviews_and_merch(self, client: AsyncClient, session, participation):
        await client.post(URL, json=set_body(participation))

        [history] = (await session.execute(select(FestivalPerformanceHistory))).scalars().all()
        assert history.participation_id == participation.id
        assert history.festival_id == "fest-1"
        assert history.songs_performed == 8
        assert history.merch_revenue == 1_920
        assert history.slot_type == "headliner"

        reviews = (await session.execute(select(FestivalReview))).scalars().all()
        assert len(reviews) == 3
        assert len({r.publication_name for r in reviews}) == 3
        assert all(r.performance_id == history.id and r.score == 80 for r in reviews)
        assert all(r.sentiment == "positive" for r in reviews)

        [sale] = (await session.execute(select(FestivalMerchSale))).scalars().all()
        assert (sale.gross_revenue, sale.festival_cut, sale.net_revenue) == (1_920, 384, 1_536)

    async def test_pays_band_and_marks_slot_performed(self, client: AsyncClient, session, band, participation):
        await client.post(URL, json=set_body(participation))

        await session.refresh(band)
        await session.refresh(participation)
        assert participation.status == "performed"
        assert band.fame == 815
        assert band.band_balance == 14_300 + 1_536

        [earning] = (await session.execute(select(BandEarning))).scalars().all()
        assert earning.source == "festival"
        assert earning.amount == 15_836
        assert earning.details == {"participation_id": participation.id, "payment": 14_300, "merch_net": 1_536}

    async def test_sends_inbox_message(self, client: AsyncClient, session, participation):
        await client.post(URL, json=set_body(participation))

        [message] = (await session.execute(select(InboxMessage))).scalars().all()
        assert message.user_id == "user-1"
        assert message.message_type == "festival_result"
        assert message.priority == "high"
        assert message.content.startswith("Your performance scored 80/100!")
        assert "Earnings: $14,300" in message.content

    async def test_weaker_set_gets_fewer_reviews_and_normal_priority(self, client: AsyncClient, session, participation):
        await client.post(URL, json=set_body(participation, performanceScore=65, crowdEnergyPeak=70, eventResponses=[]))

        reviews = (await session.execute(select(FestivalReview))).scalars().all()
        [message] = (await session.execute(select(InboxMessage))).scalars().all()
        assert len(reviews) == 2
        assert message.priority == "normal"

    async def test_unset_payout_uses_default(self, client: AsyncClient, session: AsyncSession, band):
        participation = FestivalParticipant(event_id="fest-2", band_id=band.id, user_id="user-1")
        session.add(participation)
        await session.commit()

        response = await client.post(URL, json=set_body(participation))

        assert response.status_code == 200
        assert response.json()["paymentEarned"] == 7_150

    async def test_unknown_participation(self, client: AsyncClient, band):
        response = await client.post(
            URL,
            json={
                "participationId": "missing",
                "bandId": band.id,
                "performanceScore": 80,
                "crowdEnergyPeak": 90,
                "crowdEnergyAvg": 60,
            },
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Participation not found: missing"}

    async def test_unknown_band_leaves_slot_untouched(self, client: AsyncClient, session, participation):
        response = await client.post(URL, json=set_body(participation, bandId="missing"))

        assert response.status_code == 500
        assert response.json() == {"error": "Band not found"}
        await session.refresh(participation)
        assert participation.status == "confirmed"

    async def test_out_of_range_score_is_reported_as_500(self, client: AsyncClient, participation):
        response = await client.post(URL, json=set_body(participation, performanceScore=150))

        assert response.status_code == 500
        assert "error" in response.json()
