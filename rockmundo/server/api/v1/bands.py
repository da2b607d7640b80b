"""Band overview endpoint."""

from fastapi import APIRouter, Query

from rockmundo.core.models.io.bands import BandOverviewRead
from rockmundo.server.services.bands import BandService
from rockmundo.server.services.deps import SessionDep

router = APIRouter(tags=["bands"])


@router.get(
    "/{band_id}/overview",
    response_model=BandOverviewRead,
    summary="Band Overview",
    description="Chart series for the band overview tab: engagement trend, activity and profile metrics.",
    responses={404: {"description": "Band not found"}},
)
async def get_band_overview(
    band_id: str,
    session: SessionDep,
    skill_rating: float = Query(default=0, ge=0, le=100, description="Average member skill, computed client-side"),
) -> BandOverviewRead:
    return await BandService(session).overview(band_id, skill_rating=skill_rating)
