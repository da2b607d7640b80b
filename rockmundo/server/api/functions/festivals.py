"""``complete-festival-performance`` edge function."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from rockmundo.core.logging_config import get_logger
from rockmundo.core.models.io.festivals import (
    CompleteFestivalPerformanceRequest,
    CompleteFestivalPerformanceResponse,
)
from rockmundo.core.monitoring import log_error
from rockmundo.errors import GameError
from rockmundo.server.services.deps import RngDep, SessionDep
from rockmundo.server.services.festivals import FestivalService

from .responses import error_response, json_response

logger = get_logger(__name__)

router = APIRouter(tags=["functions"])


@router.post(
    "/complete-festival-performance",
    response_model=CompleteFestivalPerformanceResponse,
    summary="Complete Festival Performance",
    description="Settle a festival set: history, press reviews, merch sales, band payout and inbox message.",
    responses={500: {"description": "Any failure, as {\"error\": message}"}},
)
async def complete_festival_performance(request: Request, session: SessionDep, rng: RngDep) -> JSONResponse:
    """
    Complete a festival performance.

    Failures are reported as HTTP 500 with ``{"error": message}``, matching
    the major event function.
    """
    try:
        payload = CompleteFestivalPerformanceRequest.model_validate(await request.json())
        completion = await FestivalService(session, rng).complete_performance(payload)
    except GameError as e:
        logger.warning(f"complete-festival-performance rejected: {e.message}")
        log_error(type(e).__name__, e.message, {"function": "complete-festival-performance"})
        return error_response(e.message, 500)
    except Exception as e:
        logger.error(f"Festival performance error: {e}", exc_info=True)
        log_error(type(e).__name__, str(e), {"function": "complete-festival-performance"})
        return error_response(str(e), 500)

    outcome = completion.outcome
    body = CompleteFestivalPerformanceResponse(
        performance_score=payload.performance_score,
        payment_earned=outcome.rewards.payment,
        fame_earned=outcome.rewards.fame,
        merch_revenue=outcome.rewards.merch_net,
        new_fans_gained=outcome.rewards.fans,
        critic_score=outcome.critic_score,
        fan_score=outcome.fan_score,
        review_headline=outcome.headline,
        highlights=outcome.highlights,
    )
    return json_response(body.model_dump(by_alias=True))
