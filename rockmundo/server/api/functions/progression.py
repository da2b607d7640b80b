"""``progression`` edge function."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from rockmundo.core.models.io.progression import (
    ProfileRead,
    ProgressionRequest,
    ProgressionResponse,
    SkillProgressRead,
    WalletRead,
)
from rockmundo.server.services.deps import CurrentUserDep, SessionDep
from rockmundo.server.services.progression import ProgressionService

from .responses import json_response

router = APIRouter(tags=["functions"])


@router.post(
    "/progression",
    response_model=ProgressionResponse,
    summary="Progression Action",
    description=(
        "Run one progression action for the caller: claim_daily_xp, spend_skill_xp, "
        "spend_attribute_points or award_action_xp. Returns the updated profile state."
    ),
    responses={
        400: {"description": "Unknown action or a rule violation"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Caller has no profile"},
        409: {"description": "Action XP event already recorded"},
        429: {"description": "Too many action XP awards in the last minute"},
    },
)
async def progression(payload: ProgressionRequest, user_id: CurrentUserDep, session: SessionDep) -> JSONResponse:
    """
    Apply a progression action.

    - **action**: which action to run.
    - **skill_slug** / **xp_amount**: for ``spend_skill_xp``.
    - **attribute_key** / **points**: for ``spend_attribute_points``.
    - **amount**, **category**, **action_key**, **metadata**: for ``award_action_xp``.
    """
    result = await ProgressionService(session).handle(user_id, payload)
    response = ProgressionResponse(
        action=result.action,
        message=result.message,
        profile=ProfileRead.model_validate(result.profile),
        wallet=WalletRead.model_validate(result.wallet) if result.wallet else None,
        attributes=result.attributes,
        skill_progress=SkillProgressRead.model_validate(result.skill_progress) if result.skill_progress else None,
    )
    return json_response(response.model_dump(mode="json"))
