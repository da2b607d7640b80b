"""
``complete-major-event`` edge function.

The client fires this once the third song of a major event performance has
been rated. Its contract predates this server: any failure, including a bad
request body, is reported as HTTP 500 with ``{"error": message}``.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from rockmundo.core.logging_config import get_logger
from rockmundo.core.models.io.major_events import CompleteMajorEventRequest, CompleteMajorEventResponse
from rockmundo.core.monitoring import log_error
from rockmundo.errors import GameError
from rockmundo.server.services.deps import SessionDep
from rockmundo.server.services.major_events import MajorEventService

from .responses import error_response, json_response

logger = get_logger(__name__)

router = APIRouter(tags=["functions"])


@router.post(
    "/complete-major-event",
    response_model=CompleteMajorEventResponse,
    summary="Complete Major Event Performance",
    description="Rate a finished major event performance, pay the band and mark it completed.",
    responses={500: {"description": "Any failure, as {\"error\": message}"}},
)
async def complete_major_event(request: Request, session: SessionDep) -> JSONResponse:
    """
    Complete a major event performance.

    - **performanceId**: id of the major_event_performances row to settle.
    """
    try:
        payload = CompleteMajorEventRequest.model_validate(await request.json())
        rewards = await MajorEventService(session).complete_performance(payload.performance_id)
    except GameError as e:
        logger.warning(f"complete-major-event rejected: {e.message}")
        log_error(type(e).__name__, e.message, {"function": "complete-major-event"})
        return error_response(e.message, 500)
    except Exception as e:
        logger.error(f"complete-major-event failed: {e}", exc_info=True)
        log_error(type(e).__name__, str(e), {"function": "complete-major-event"})
        return error_response(str(e), 500)

    body = CompleteMajorEventResponse(
        overall_rating=rewards.overall_rating,
        cash_earned=rewards.cash_earned,
        fame_gained=rewards.fame_gained,
        fans_gained=rewards.fans_gained,
    )
    return json_response(body.model_dump())
