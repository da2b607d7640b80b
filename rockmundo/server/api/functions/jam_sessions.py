"""``complete-jam-session`` edge function."""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from rockmundo.core.models.io.jam_sessions import (
    CompleteJamSessionRequest,
    CompleteJamSessionResponse,
    JamOutcomeRead,
)
from rockmundo.server.services.deps import CurrentUserDep, RngDep, SessionDep
from rockmundo.server.services.jam_sessions import JamSessionService

from .responses import json_response

router = APIRouter(tags=["functions"])


@router.post(
    "/complete-jam-session",
    response_model=CompleteJamSessionResponse,
    summary="Complete Jam Session",
    description="Host-only. Award XP, skill XP and chemistry to every player and roll for a gifted song.",
    responses={
        400: {"description": "Missing session_id or session not active"},
        401: {"description": "Missing or invalid bearer token"},
        403: {"description": "Caller is not the host"},
        404: {"description": "Profile or session not found"},
    },
)
async def complete_jam_session(
    user_id: CurrentUserDep,
    session: SessionDep,
    rng: RngDep,
    body: Optional[CompleteJamSessionRequest] = None,
) -> JSONResponse:
    """
    Complete a jam session.

    - **session_id**: id of the active jam session hosted by the caller.
    """
    completion = await JamSessionService(session, rng).complete_session(user_id, body.session_id if body else None)
    response = CompleteJamSessionResponse(
        session_id=completion.session_id,
        total_xp_awarded=completion.total_xp_awarded,
        duration_minutes=completion.duration_minutes,
        synergy_score=completion.synergy_score,
        mood_score=completion.mood_score,
        gifted_song_id=completion.gifted_song_id,
        outcomes=[
            JamOutcomeRead(
                participant_id=o.participant_id,
                xp_earned=o.xp_earned,
                skill_slug=o.skill_slug,
                skill_xp_gained=o.skill_xp_gained,
                chemistry_gained=o.chemistry_gained,
                performance_rating=o.performance_rating,
                received_song=o.gifted_song_id is not None,
            )
            for o in completion.outcomes
        ],
    )
    return json_response(response.model_dump())
