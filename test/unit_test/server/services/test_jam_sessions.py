"""Gifted song rolls when a jam session is completed."""

import random
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from rockmundo.core.database.entities.jam_sessions import JamGiftedSongLog, JamSession, JamSessionParticipant
from rockmundo.core.database.entities.profiles import Profile
from rockmundo.core.database.entities.songs import Song
from rockmundo.server.services.jam_sessions import JamSessionService

pytestmark = pytest.mark.asyncio

NOW = datetime(2026, 7, 1, 20, 0, tzinfo=timezone.utc)


class AlwaysGiftRandom(random.Random):
    """Every draw is 0.0: the gift roll always hits and choices take the first option."""

    def random(self) -> float:
        return 0.0


@pytest_asyncio.fixture
async def host(session: AsyncSession) -> Profile:
    profile = Profile(user_id="host-user", username="host")
    session.add(profile)
    await session.commit()
    return profile


@pytest_asyncio.fixture
async def jam(session: AsyncSession, host: Profile) -> JamSession:
    """A solo 40-minute session in an active state."""
    jam = JamSession(host_id=host.id, status="active", genre="Rock", tempo=120, started_at=NOW - timedelta(minutes=40))
    session.add(jam)
    session.add(
        JamSessionParticipant(jam_session_id=jam.id, profile_id=host.id, instrument_skill_slug="instruments_basic_bass")
    )
    await session.commit()
    return jam


class TestGiftedSong:
    async def test_gift_creates_demo_song(self, session: AsyncSession, host, jam):
        completion = await JamSessionService(session, AlwaysGiftRandom()).complete_session(
            "host-user", jam.id, now=NOW
        )

        assert completion.gifted_song_id is not None
        song = await session.get(Song, completion.gifted_song_id)
        assert song.title == "Midnight Jam"
        assert song.status == "demo"
        assert song.quality_score == 40
        assert song.duration_seconds == 180
        assert (song.genre, song.tempo) == ("Rock", 120)

        [outcome] = completion.outcomes
        assert outcome.gifted_song_id == song.id

        [log] = (await session.execute(select(JamGiftedSongLog))).scalars().all()
        assert (log.profile_id, log.session_id, log.song_id) == (host.id, jam.id, song.id)
        assert log.created_at == NOW

        await session.refresh(jam)
        assert jam.gifted_song_id == song.id

    async def test_recent_gift_blocks_another(self, session: AsyncSession, host, jam):
        session.add(JamGiftedSongLog(profile_id=host.id, session_id=jam.id, song_id="old", created_at=NOW - timedelta(days=2)))
        await session.commit()

        completion = await JamSessionService(session, AlwaysGiftRandom()).complete_session(
            "host-user", jam.id, now=NOW
        )

        assert completion.gifted_song_id is None
        assert completion.outcomes[0].gifted_song_id is None
        assert (await session.execute(select(Song))).scalars().all() == []

    async def test_gift_older_than_cooldown_does_not_block(self, session: AsyncSession, host, jam):
        session.add(JamGiftedSongLog(profile_id=host.id, session_id=jam.id, song_id="old", created_at=NOW - timedelta(days=8)))
        await session.commit()

        completion = await JamSessionService(session, AlwaysGiftRandom()).complete_session(
            "host-user", jam.id, now=NOW
        )

        assert completion.gifted_song_id is not None


class TestScores:
    async def test_scores_from_first_draws(self, session: AsyncSession, host, jam):
        completion = await JamSessionService(session, AlwaysGiftRandom()).complete_session(
            "host-user", jam.id, now=NOW
        )

        # one instrument: synergy 50 + 10; mood 50 + 40 // 3
        assert completion.synergy_score == 60
        assert completion.mood_score == 63
        assert completion.duration_minutes == 40
        assert completion.total_xp_awarded == 100 + 10

    async def test_host_not_listed_as_participant_still_earns(self, session: AsyncSession, host):
        jam = JamSession(host_id=host.id, status="active", started_at=NOW - timedelta(minutes=30))
        session.add(jam)
        await session.commit()

        completion = await JamSessionService(session, random.Random(3)).complete_session("host-user", jam.id, now=NOW)

        [outcome] = completion.outcomes
        assert outcome.participant_id == host.id
        assert outcome.skill_slug == "instruments_basic_acoustic_guitar"
