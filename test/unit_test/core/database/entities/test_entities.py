"""Unit tests for entity defaults and column mapping."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy import text

from rockmundo.core.database.base import as_utc, new_id
from rockmundo.core.database.entities.bands import Band, BandEarning
from rockmundo.core.database.entities.jam_sessions import JamSession
from rockmundo.core.database.entities.major_events import MajorEventPerformance
from rockmundo.core.database.entities.profiles import PlayerAttributes, Profile


class TestDefaults:
    def test_ids_are_uuid_strings(self):
        assert len(new_id()) == 36
        assert Band(name="a").id != Band(name="b").id

    def test_profile_defaults(self):
        profile = Profile(user_id="u", username="ace")
        assert (profile.health, profile.experience, profile.cash) == (100, 0, 0)

    def test_statuses(self):
        assert JamSession(host_id="p").status == "waiting"
        assert MajorEventPerformance(instance_id="i", band_id="b", user_id="u").status == "accepted"

    def test_every_attribute_starts_at_ten(self):
        attributes = PlayerAttributes(profile_id="p")
        assert attributes.stage_presence == attributes.business_acumen == 10

    def test_repr(self):
        band = Band(name="The Testers", fame=5)
        assert "The Testers" in repr(band)
        assert "fame=5" in repr(band)


class TestMetadataColumn:
    @pytest.mark.asyncio
    async def test_details_stored_in_metadata_column(self, in_memory_session):
        band = Band(name="The Testers")
        earning = BandEarning(band_id=band.id, amount=10, source="gig", details={"venue": "The Cavern"})
        in_memory_session.add_all([band, earning])
        await in_memory_session.flush()

        result = await in_memory_session.execute(
            text("SELECT metadata FROM band_earnings WHERE id = :id"), {"id": earning.id}
        )

        assert "The Cavern" in result.scalar_one()


class TestTimestamps:
    def test_default_timestamps_are_aware_utc(self):
        assert Band(name="a").created_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_timestamps_survive_a_round_trip(self, in_memory_session):
        band = Band(name="The Testers")
        band_id, created_at = band.id, band.created_at
        in_memory_session.add(band)
        await in_memory_session.flush()
        in_memory_session.expire(band)

        loaded = await in_memory_session.get(Band, band_id, populate_existing=True)

        assert as_utc(loaded.created_at) == created_at
