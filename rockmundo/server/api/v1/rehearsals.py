"""
Rehearsal booking endpoints.

Availability checks scan the room's existing bookings; booking charges the
band and reserves the room.
"""

from datetime import date, datetime, timedelta
from typing import List

from fastapi import APIRouter, Query, status

from rockmundo.core.database.base import as_utc
from rockmundo.core.models.io.rehearsals import (
    AvailabilityRead,
    BookingWindowRead,
    RehearsalBookingCreate,
    RehearsalRead,
    SlotRead,
)
from rockmundo.game.rehearsals import MAX_DURATION_HOURS, MIN_DURATION_HOURS
from rockmundo.server.services.deps import SessionDep
from rockmundo.server.services.rehearsals import RehearsalService

router = APIRouter(tags=["rehearsals"])


@router.get(
    "/availability",
    response_model=AvailabilityRead,
    summary="Check Room Availability",
    description="Whether a room is free for the requested window, and which active bookings block it.",
    responses={404: {"description": "Room not found"}},
)
async def check_availability(
    session: SessionDep,
    room_id: str,
    start: datetime,
    hours: int = Query(ge=MIN_DURATION_HOURS, le=MAX_DURATION_HOURS),
) -> AvailabilityRead:
    start = as_utc(start)
    conflicts = await RehearsalService(session).conflicts(room_id, start, hours)
    return AvailabilityRead(
        room_id=room_id,
        start=start,
        end=start + timedelta(hours=hours),
        available=not conflicts,
        conflicts=[BookingWindowRead.model_validate(c) for c in conflicts],
    )


@router.get(
    "/slots",
    response_model=List[SlotRead],
    summary="Day Slots",
    description="Every hourly start on a day that fits before closing, flagged free or taken.",
    responses={404: {"description": "Room not found"}},
)
async def list_day_slots(
    session: SessionDep,
    room_id: str,
    day: date,
    hours: int = Query(ge=MIN_DURATION_HOURS, le=MAX_DURATION_HOURS),
) -> List[SlotRead]:
    slots = await RehearsalService(session).day_slots(room_id, day, hours)
    return [SlotRead(start=s.start, end=s.end, available=s.available) for s in slots]


@router.post(
    "",
    response_model=RehearsalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Book Rehearsal",
    description="Reserve a room for a band and charge the band balance.",
    responses={
        400: {"description": "Invalid duration or insufficient band funds"},
        404: {"description": "Band or room not found"},
        409: {"description": "Room already booked for that time"},
    },
)
async def book_rehearsal(booking: RehearsalBookingCreate, session: SessionDep) -> RehearsalRead:
    """
    Book a rehearsal.

    - **band_id**: band paying for the room.
    - **room_id**: rehearsal room to reserve.
    - **scheduled_start** / **duration_hours**: the window, 1 to 8 hours.
    - **song_id**: optional song to rehearse.
    """
    rehearsal = await RehearsalService(session).book(
        band_id=booking.band_id,
        room_id=booking.room_id,
        start=booking.scheduled_start,
        hours=booking.duration_hours,
        song_id=booking.song_id,
    )
    return RehearsalRead.model_validate(rehearsal)


@router.post(
    "/{rehearsal_id}/complete",
    response_model=RehearsalRead,
    summary="Complete Rehearsal",
    description="Mark a rehearsal completed and apply its chemistry gain to the band.",
    responses={400: {"description": "Already completed or cancelled"}, 404: {"description": "Not found"}},
)
async def complete_rehearsal(rehearsal_id: str, session: SessionDep) -> RehearsalRead:
    rehearsal = await RehearsalService(session).complete(rehearsal_id)
    return RehearsalRead.model_validate(rehearsal)
