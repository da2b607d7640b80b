"""Rehearsal room availability and booking."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.base import utc_now
from rockmundo.core.database.entities.rehearsals import BandRehearsal, BandSongFamiliarity, RehearsalRoom
from rockmundo.core.database.repositories import BandRepository, RehearsalRepository
from rockmundo.core.logging_config import get_logger
from rockmundo.errors import ConflictError, NotFoundError, ValidationError
from rockmundo.game import rehearsals as rules

logger = get_logger(__name__)


class RehearsalService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.rehearsals = RehearsalRepository(session)
        self.bands = BandRepository(session)

    async def _room(self, room_id: str) -> RehearsalRoom:
        room = await self.rehearsals.get_room(room_id)
        if room is None:
            raise NotFoundError(f"Rehearsal room not found: {room_id}")
        return room

    async def conflicts(self, room_id: str, start: datetime, hours: int) -> List[BandRehearsal]:
        """Active bookings of the room overlapping the requested window."""
        await self._room(room_id)
        start, end = rules.booking_window(start, hours)
        bookings = await self.rehearsals.list_room_bookings(room_id, start, end)
        return rules.find_conflicts(bookings, start, end)

    async def day_slots(self, room_id: str, day: date, hours: int) -> List[rules.Slot]:
        await self._room(room_id)
        day_start = datetime.combine(day, time(0, tzinfo=timezone.utc))
        bookings = await self.rehearsals.list_room_bookings(room_id, day_start, day_start + timedelta(days=1))
        return rules.day_slots(bookings, day, hours)

    async def book(
        self,
        band_id: str,
        room_id: str,
        start: datetime,
        hours: int,
        song_id: Optional[str] = None,
    ) -> BandRehearsal:
        """
        Book a room for a band and charge the band balance.

        The overlap check here is advisory; the database exclusion constraint
        stays the authority when two bookings race.

        Raises:
            NotFoundError: Unknown band or room.
            ConflictError: The window overlaps an active booking.
            ValidationError: Bad duration or the band cannot afford the room.
        """
        try:
            band = await self.bands.get_by_id(band_id)
            if band is None:
                raise NotFoundError(f"Band not found: {band_id}")
            room = await self._room(room_id)

            start, end = rules.booking_window(start, hours)
            bookings = await self.rehearsals.list_room_bookings(room_id, start, end)
            if rules.find_conflicts(bookings, start, end):
                raise ConflictError("This room is already booked for the selected time")

            cost = rules.rehearsal_cost(room.hourly_rate, hours)
            rules.check_affordable(band.band_balance or 0, cost)
            rewards = rules.rehearsal_rewards(room.quality_rating, room.equipment_quality, hours)

            band.band_balance = (band.band_balance or 0) - cost
            self.session.add(band)
            rehearsal = await self.rehearsals.add(
                BandRehearsal(
                    band_id=band.id,
                    rehearsal_room_id=room.id,
                    scheduled_start=start,
                    scheduled_end=end,
                    duration_hours=hours,
                    total_cost=cost,
                    selected_song_id=song_id,
                    chemistry_gain=rewards.chemistry_gain,
                    xp_earned=rewards.xp_earned,
                    familiarity_gained=rewards.familiarity_gained,
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Band {band.id} booked room {room.id} for {hours}h from {start.isoformat()} (${cost})")
        return rehearsal

    async def complete(self, rehearsal_id: str, now: Optional[datetime] = None) -> BandRehearsal:
        """
        Mark a scheduled rehearsal completed and apply its gains.

        The band gains the booking's chemistry (capped at 100) and, when a song
        was picked, familiarity with that song (capped at an hour of practice).
        """
        now = now or utc_now()
        try:
            rehearsal = await self.rehearsals.get_by_id(rehearsal_id)
            if rehearsal is None:
                raise NotFoundError(f"Rehearsal not found: {rehearsal_id}")
            if rehearsal.status in rules.INACTIVE_STATUSES:
                raise ValidationError(f"Rehearsal is already {rehearsal.status}")

            band = await self.bands.get_by_id(rehearsal.band_id)
            if band is None:
                raise NotFoundError("Band not found")

            band.chemistry_level = rules.apply_chemistry(band.chemistry_level or 0, rehearsal.chemistry_gain)
            rehearsal.status = "completed"
            rehearsal.completed_at = now
            self.session.add_all([band, rehearsal])

            if rehearsal.selected_song_id:
                familiarity = await self.rehearsals.get_song_familiarity(
                    band.id, rehearsal.selected_song_id
                ) or BandSongFamiliarity(band_id=band.id, song_id=rehearsal.selected_song_id)
                familiarity.familiarity_minutes = rules.song_familiarity(
                    familiarity.familiarity_minutes, rehearsal.familiarity_gained or 0
                )
                familiarity.last_rehearsed_at = now
                self.session.add(familiarity)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Rehearsal {rehearsal.id} completed; band {band.id} chemistry now {band.chemistry_level}")
        return rehearsal
